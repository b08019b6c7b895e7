"""Validated, immutable value types for the individual Task fields."""
from __future__ import annotations

import re
from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional

from .enums import PriorityLevel, StatusLevel
from .errors import IllegalValueError

DEFAULT_DATETIME_FORMAT = "%d/%m/%Y %H%M"

NAME_CONSTRAINTS = "Task names should be spaces or alphanumeric characters"
PHONE_CONSTRAINTS = "Phone numbers should only contain numbers, and be at least 3 digits long"
EMAIL_CONSTRAINTS = "Emails should be in the form local-part@domain"
ADDRESS_CONSTRAINTS = "Addresses can take any value, but should not be blank"
DATETIME_CONSTRAINTS = "Date/time should be in the form {fmt} and the start must not be after the end"
PRIORITY_CONSTRAINTS = "Priority should be h (high), m (medium) or l (low)"
STATUS_CONSTRAINTS = "Status should be done or undone"

_NAME_RE = re.compile(r"[^\W_]+(?: [^\W_]+)*")
_PHONE_RE = re.compile(r"\d{3,}")
_EMAIL_RE = re.compile(r"[\w.%+-]+@[A-Za-z0-9-]+(?:\.[A-Za-z0-9-]+)*")


def _require_text(value: object, message: str) -> str:
    if not isinstance(value, str) or not value.strip():
        raise IllegalValueError(message)
    return value


@dataclass(frozen=True)
class Name:
    full_name: str

    def __post_init__(self) -> None:
        text = _require_text(self.full_name, NAME_CONSTRAINTS)
        if not _NAME_RE.fullmatch(text):
            raise IllegalValueError(NAME_CONSTRAINTS)

    def __str__(self) -> str:
        return self.full_name


@dataclass(frozen=True)
class Phone:
    value: str

    def __post_init__(self) -> None:
        text = _require_text(self.value, PHONE_CONSTRAINTS)
        if not _PHONE_RE.fullmatch(text):
            raise IllegalValueError(PHONE_CONSTRAINTS)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Email:
    value: str

    def __post_init__(self) -> None:
        text = _require_text(self.value, EMAIL_CONSTRAINTS)
        if not _EMAIL_RE.fullmatch(text):
            raise IllegalValueError(EMAIL_CONSTRAINTS)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class Address:
    value: str

    def __post_init__(self) -> None:
        _require_text(self.value, ADDRESS_CONSTRAINTS)

    def __str__(self) -> str:
        return self.value


@dataclass(frozen=True)
class DateTime:
    """A deadline (``end``) with an optional ``start`` for ranged tasks."""

    start: Optional[datetime]
    end: datetime
    fmt: str = field(default=DEFAULT_DATETIME_FORMAT, compare=False, repr=False)

    def __post_init__(self) -> None:
        message = DATETIME_CONSTRAINTS.format(fmt=self.fmt)
        if not isinstance(self.end, datetime):
            raise IllegalValueError(message)
        if self.start is not None:
            if not isinstance(self.start, datetime):
                raise IllegalValueError(message)
            if self.start > self.end:
                raise IllegalValueError(message)

    @classmethod
    def parse(
        cls,
        end_text: str,
        start_text: str | None = None,
        fmt: str = DEFAULT_DATETIME_FORMAT,
    ) -> DateTime:
        return cls(
            start=_parse_datetime(start_text, fmt) if start_text else None,
            end=_parse_datetime(end_text, fmt),
            fmt=fmt,
        )

    def __str__(self) -> str:
        if self.start is None:
            return self.end.strftime(self.fmt)
        return f"{self.start.strftime(self.fmt)} to {self.end.strftime(self.fmt)}"


def _parse_datetime(text: str | None, fmt: str) -> datetime:
    message = DATETIME_CONSTRAINTS.format(fmt=fmt)
    if not isinstance(text, str):
        raise IllegalValueError(message)
    try:
        return datetime.strptime(text.strip(), fmt)
    except ValueError as exc:
        raise IllegalValueError(message) from exc


@dataclass(frozen=True)
class Priority:
    level: PriorityLevel

    def __post_init__(self) -> None:
        if not isinstance(self.level, PriorityLevel):
            raise IllegalValueError(PRIORITY_CONSTRAINTS)

    @classmethod
    def parse(cls, text: str) -> Priority:
        key = _require_text(text, PRIORITY_CONSTRAINTS).strip().lower()
        for level in PriorityLevel:
            if key in (level.value, level.label):
                return cls(level)
        raise IllegalValueError(PRIORITY_CONSTRAINTS)

    def __str__(self) -> str:
        return self.level.label


@dataclass(frozen=True)
class Status:
    level: StatusLevel = StatusLevel.UNDONE

    def __post_init__(self) -> None:
        if not isinstance(self.level, StatusLevel):
            raise IllegalValueError(STATUS_CONSTRAINTS)

    @classmethod
    def parse(cls, text: str) -> Status:
        key = _require_text(text, STATUS_CONSTRAINTS).strip().lower()
        try:
            return cls(StatusLevel(key))
        except ValueError as exc:
            raise IllegalValueError(STATUS_CONSTRAINTS) from exc

    @property
    def is_done(self) -> bool:
        return self.level is StatusLevel.DONE

    def __str__(self) -> str:
        return self.level.value
