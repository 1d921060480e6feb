"""Lookup, create, update-merge and delete steps shared by the entity services."""
from __future__ import annotations

import logging
from typing import Any, Callable, Generic, Mapping, Optional, Protocol, TypeVar

from gym_api.core.utils import MonotonicClock, new_id
from gym_api.domain.errors import NotFoundError
from gym_api.domain.records import GymClass, Member, Trainer, merge
from gym_api.repositories import Collection

R = TypeVar("R", Member, GymClass, Trainer)

logger = logging.getLogger(__name__)


class Clock(Protocol):
    def now(self) -> int: ...


class RecordService(Generic[R]):
    """
    Base for the per-entity services.

    Subclasses set ``collection_name`` (the repository attribute) and
    ``label`` (lower-case entity name used in messages).
    """

    collection_name = ""
    label = "record"

    def __init__(
        self,
        repository,
        *,
        clock: Optional[Clock] = None,
        id_factory: Optional[Callable[[], str]] = None,
    ) -> None:
        self.repository = repository
        self.collection: Collection[R] = getattr(repository, self.collection_name)
        self.clock = clock or MonotonicClock()
        self.new_id = id_factory or new_id

    @property
    def title(self) -> str:
        return self.label[:1].upper() + self.label[1:]

    def _list(self) -> list[R]:
        return self.collection.values()

    def _get(self, record_id: str) -> R:
        record = self.collection.get(record_id)
        if record is None:
            logger.debug("%s %s not found", self.label, record_id)
            raise NotFoundError(f"{self.title} with id={record_id} not found")
        return record

    def _create(self, build: Callable[[str, int], R]) -> R:
        record = build(self.new_id(), self.clock.now())
        with self.collection.lock:
            self.collection.insert(record.id, record)
        logger.info("Created %s %s", self.label, record.id)
        return record

    def _update(self, record_id: str, changes: Mapping[str, Any], *, action: str) -> R:
        """Merge ``changes`` into the stored record; ``action`` reads like "update a member"."""
        with self.collection.lock:
            current = self.collection.get(record_id)
            if current is None:
                logger.debug("%s %s not found for update", self.label, record_id)
                raise NotFoundError(f"Couldn't {action} with id={record_id}. {self.title} not found")
            updated = merge(current, changes, self.clock.now())
            self.collection.insert(current.id, updated)
        logger.info("Updated %s %s (%s)", self.label, record_id, ", ".join(sorted(changes)))
        return updated

    def _delete(self, record_id: str) -> R:
        with self.collection.lock:
            removed = self.collection.remove(record_id)
        if removed is None:
            logger.debug("%s %s not found for delete", self.label, record_id)
            raise NotFoundError(f"Couldn't delete a {self.label} with id={record_id}. {self.title} not found.")
        logger.info("Deleted %s %s", self.label, record_id)
        return removed
