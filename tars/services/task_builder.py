from __future__ import annotations

import logging
from collections.abc import Iterable

from tars.config import SETTINGS, Settings
from tars.domain.fields import Address, DateTime, Email, Name, Phone, Priority, Status
from tars.domain.tags import Tag, UniqueTagList
from tars.domain.task import Task

logger = logging.getLogger(__name__)


class TaskBuilder:
    """Turns raw user-entered strings into validated Task instances."""

    def __init__(self, settings: Settings = SETTINGS) -> None:
        self._settings = settings

    def build_contact(
        self,
        name: str,
        phone: str,
        email: str,
        address: str,
        tags: Iterable[str] = (),
    ) -> Task:
        task = Task.contact(
            Name(name),
            Phone(phone),
            Email(email),
            Address(address),
            self._tag_list(tags),
        )
        logger.debug("Built contact task: %s", task)
        return task

    def build_scheduled(
        self,
        name: str,
        end: str,
        start: str | None = None,
        priority: str | None = None,
        status: str | None = None,
        tags: Iterable[str] = (),
    ) -> Task:
        task = Task.scheduled(
            Name(name),
            DateTime.parse(end, start, fmt=self._settings.datetime_format),
            Priority.parse(priority or self._settings.default_priority),
            Status.parse(status) if status else None,
            self._tag_list(tags),
        )
        logger.debug("Built scheduled task: %s", task)
        return task

    @staticmethod
    def _tag_list(names: Iterable[str]) -> UniqueTagList:
        return UniqueTagList(Tag(name.strip()) for name in names)
