from __future__ import annotations

from typing import Optional

from .checks import require_absent, require_present
from .enums import TaskShape
from .fields import Address, DateTime, Email, Name, Phone, Priority, Status
from .read_only import ReadOnlyTask
from .tags import UniqueTagList


class Task(ReadOnlyTask):
    """
    A task in tars, built either as a contact or as a scheduled item.

    Guarantees: the fields required by ``shape`` are present, the fields of
    the other shape are unset, and the task owns its tag list outright (tags
    are copied on the way in and out).
    """

    def __init__(
        self,
        *,
        shape: TaskShape,
        name: Name,
        tags: UniqueTagList,
        date_time: Optional[DateTime] = None,
        priority: Optional[Priority] = None,
        status: Optional[Status] = None,
        phone: Optional[Phone] = None,
        email: Optional[Email] = None,
        address: Optional[Address] = None,
    ) -> None:
        shape = TaskShape(shape)
        if shape is TaskShape.CONTACT:
            require_present(name=name, phone=phone, email=email, address=address, tags=tags)
            require_absent(shape, date_time=date_time, priority=priority, status=status)
        else:
            require_present(name=name, date_time=date_time, priority=priority, tags=tags)
            require_absent(shape, phone=phone, email=email, address=address)
        self._shape = shape
        self._name = name
        self._date_time = date_time
        self._priority = priority
        self._status = status
        self._phone = phone
        self._email = email
        self._address = address
        self._tags = UniqueTagList(tags)

    @classmethod
    def contact(
        cls,
        name: Name,
        phone: Phone,
        email: Email,
        address: Address,
        tags: UniqueTagList,
    ) -> Task:
        """Every field must be present."""
        return cls(
            shape=TaskShape.CONTACT,
            name=name,
            phone=phone,
            email=email,
            address=address,
            tags=tags,
        )

    @classmethod
    def scheduled(
        cls,
        name: Name,
        date_time: DateTime,
        priority: Priority,
        status: Optional[Status],
        tags: UniqueTagList,
    ) -> Task:
        """Every field except ``status`` must be present."""
        return cls(
            shape=TaskShape.SCHEDULE,
            name=name,
            date_time=date_time,
            priority=priority,
            status=status,
            tags=tags,
        )

    @classmethod
    def from_source(cls, source: ReadOnlyTask) -> Task:
        """
        Copy constructor.

        The copy is always a scheduled task: phone, email and address of the
        source are not carried over.
        """
        return cls.scheduled(
            source.name,
            source.date_time,
            source.priority,
            source.status,
            source.tags,
        )

    @property
    def shape(self) -> TaskShape:
        return self._shape

    @property
    def name(self) -> Name:
        return self._name

    @property
    def date_time(self) -> Optional[DateTime]:
        return self._date_time

    @property
    def status(self) -> Optional[Status]:
        return self._status

    @property
    def priority(self) -> Optional[Priority]:
        return self._priority

    @property
    def phone(self) -> Optional[Phone]:
        return self._phone

    @property
    def email(self) -> Optional[Email]:
        return self._email

    @property
    def address(self) -> Optional[Address]:
        return self._address

    @property
    def tags(self) -> UniqueTagList:
        return UniqueTagList(self._tags)

    def set_tags(self, replacement: UniqueTagList) -> None:
        """Replaces this task's tags with the tags in ``replacement``."""
        self._tags.set_tags(replacement)

    def __eq__(self, other: object) -> bool:
        if other is self:
            return True
        if not isinstance(other, ReadOnlyTask):
            return NotImplemented
        return self.is_same_state_as(other)

    def __hash__(self) -> int:
        # date_time, status and priority do not take part in the hash.
        return hash((self._name, self._phone, self._email, self._address, self._tags))

    def __str__(self) -> str:
        return self.as_text()

    def __repr__(self) -> str:
        return f"Task(shape={self._shape.value!r}, {self.as_text()!r})"
