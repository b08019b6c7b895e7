from __future__ import annotations


class TarsError(Exception):
    """Base class for errors raised by the tars domain."""


class MissingFieldError(TarsError, ValueError):
    """A field required by the chosen Task shape was not supplied."""

    def __init__(self, field_name: str) -> None:
        super().__init__(f"Task field '{field_name}' must be present")
        self.field_name = field_name


class IllegalValueError(TarsError, ValueError):
    """A field value, or a combination of fields, fails validation."""


class DuplicateTagError(TarsError, ValueError):
    def __init__(self, tag: object) -> None:
        super().__init__(f"Operation would result in duplicate tags: {tag}")
        self.tag = tag
