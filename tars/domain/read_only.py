from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from .fields import Address, DateTime, Email, Name, Phone, Priority, Status
from .tags import UniqueTagList


class ReadOnlyTask(ABC):
    """
    Read-only view of a task.

    Implementers expose the accessors below; state comparison and text
    rendering are defined here once so every implementer agrees on them.
    """

    @property
    @abstractmethod
    def name(self) -> Name: ...

    @property
    @abstractmethod
    def date_time(self) -> Optional[DateTime]: ...

    @property
    @abstractmethod
    def status(self) -> Optional[Status]: ...

    @property
    @abstractmethod
    def priority(self) -> Optional[Priority]: ...

    @property
    @abstractmethod
    def phone(self) -> Optional[Phone]: ...

    @property
    @abstractmethod
    def email(self) -> Optional[Email]: ...

    @property
    @abstractmethod
    def address(self) -> Optional[Address]: ...

    @property
    @abstractmethod
    def tags(self) -> UniqueTagList:
        """A copy of the tags; changing it never affects the task."""

    def is_same_state_as(self, other: Optional[ReadOnlyTask]) -> bool:
        # Compares every hashed field, so equal states always hash alike.
        if other is self:
            return True
        if other is None:
            return False
        return (
            other.name == self.name
            and other.date_time == self.date_time
            and other.priority == self.priority
            and other.status == self.status
            and other.phone == self.phone
            and other.email == self.email
            and other.address == self.address
            and other.tags == self.tags
        )

    def as_text(self) -> str:
        parts = [str(self.name)]
        if self.date_time is not None:
            parts.append(f"DateTime: {self.date_time}")
        if self.priority is not None:
            parts.append(f"Priority: {self.priority}")
        if self.status is not None:
            parts.append(f"Status: {self.status}")
        if self.phone is not None:
            parts.append(f"Phone: {self.phone}")
        if self.email is not None:
            parts.append(f"Email: {self.email}")
        if self.address is not None:
            parts.append(f"Address: {self.address}")
        parts.append(f"Tags: {self.tags}")
        return " ".join(parts)
