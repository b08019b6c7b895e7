from __future__ import annotations

from enum import StrEnum


class TaskShape(StrEnum):
    CONTACT = "contact"
    SCHEDULE = "schedule"


class StatusLevel(StrEnum):
    UNDONE = "undone"
    DONE = "done"


class PriorityLevel(StrEnum):
    HIGH = "h"
    MEDIUM = "m"
    LOW = "l"

    @property
    def label(self) -> str:
        return self.name.lower()
