"""Collections backed by SQLAlchemy tables."""
from __future__ import annotations

import threading
from dataclasses import asdict, fields
from typing import Generic, Optional, TypeVar

from sqlalchemy import select

from gym_api.db.models import GymClassRow, MemberRow, TrainerRow
from gym_api.db.session import session_scope
from gym_api.domain.records import GymClass, Member, Trainer

R = TypeVar("R", Member, GymClass, Trainer)


class SQLCollection(Generic[R]):
    """Id-to-record mapping stored as one table row per record."""

    def __init__(self, model, record_type: type[R]) -> None:
        self.model = model
        self.record_type = record_type
        # held by services across get-then-insert sequences
        self.lock = threading.RLock()

    def _to_record(self, row) -> R:
        return self.record_type(**{f.name: getattr(row, f.name) for f in fields(self.record_type)})

    def insert(self, record_id: str, record: R) -> None:
        values = asdict(record)
        values["id"] = record_id
        with self.lock, session_scope() as session:
            session.merge(self.model(**values))

    def get(self, record_id: str) -> Optional[R]:
        with session_scope() as session:
            row = session.get(self.model, record_id)
            return self._to_record(row) if row else None

    def values(self) -> list[R]:
        stmt = select(self.model).order_by(self.model.created_at, self.model.id)
        with session_scope() as session:
            return [self._to_record(row) for row in session.execute(stmt).scalars().all()]

    def remove(self, record_id: str) -> Optional[R]:
        with self.lock, session_scope() as session:
            row = session.get(self.model, record_id)
            if not row:
                return None
            record = self._to_record(row)
            session.delete(row)
            return record


class SQLRepository:
    """The three gym collections on the configured SQL database."""

    backend = "sql"

    def __init__(self) -> None:
        self.members: SQLCollection[Member] = SQLCollection(MemberRow, Member)
        self.gym_classes: SQLCollection[GymClass] = SQLCollection(GymClassRow, GymClass)
        self.trainers: SQLCollection[Trainer] = SQLCollection(TrainerRow, Trainer)
