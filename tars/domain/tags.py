from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass

from .errors import DuplicateTagError, IllegalValueError

TAG_CONSTRAINTS = "Tag names should be alphanumeric"

_TAG_RE = re.compile(r"[^\W_]+")


@dataclass(frozen=True)
class Tag:
    name: str

    def __post_init__(self) -> None:
        if not isinstance(self.name, str) or not _TAG_RE.fullmatch(self.name):
            raise IllegalValueError(TAG_CONSTRAINTS)

    def __str__(self) -> str:
        return f"[{self.name}]"


class UniqueTagList:
    """
    Ordered collection of tags that never holds the same tag twice.

    Passing another UniqueTagList to the constructor copies its contents;
    the two lists share no state afterwards.
    """

    def __init__(self, tags: Iterable[Tag] = ()) -> None:
        self._tags: list[Tag] = []
        for tag in tags:
            self.add(tag)

    def copy(self) -> UniqueTagList:
        return UniqueTagList(self)

    def add(self, tag: Tag) -> None:
        if tag in self._tags:
            raise DuplicateTagError(tag)
        self._tags.append(tag)

    def contains(self, tag: Tag) -> bool:
        return tag in self._tags

    def merge_from(self, other: Iterable[Tag]) -> None:
        for tag in other:
            if tag not in self._tags:
                self._tags.append(tag)

    def set_tags(self, replacement: Iterable[Tag]) -> None:
        """Replace every tag in this list with the contents of ``replacement``."""
        self._tags = list(UniqueTagList(replacement))

    def to_set(self) -> set[Tag]:
        return set(self._tags)

    def __contains__(self, tag: object) -> bool:
        return tag in self._tags

    def __iter__(self) -> Iterator[Tag]:
        return iter(list(self._tags))

    def __len__(self) -> int:
        return len(self._tags)

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, UniqueTagList):
            return NotImplemented
        return self.to_set() == other.to_set()

    def __hash__(self) -> int:
        return hash(frozenset(self._tags))

    def __str__(self) -> str:
        return "".join(str(tag) for tag in self._tags)

    def __repr__(self) -> str:
        return f"UniqueTagList({self._tags!r})"
