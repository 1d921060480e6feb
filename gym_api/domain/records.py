"""Record types stored in the collections and the update-merge helper."""
from __future__ import annotations

from dataclasses import dataclass, replace
from typing import Any, Mapping, Optional, TypeVar


@dataclass
class Member:
    id: str
    name: str
    email: str
    join_date: str
    membership_type: str
    created_at: int
    updated_at: Optional[int] = None


@dataclass
class GymClass:
    id: str
    name: str
    description: str
    start_time: str
    end_time: str
    trainer_id: str
    capacity: int
    created_at: int
    updated_at: Optional[int] = None


@dataclass
class Trainer:
    id: str
    name: str
    email: str
    specializations: list[str]
    created_at: int
    updated_at: Optional[int] = None


# Fields a caller may overwrite; id/created_at/updated_at are store-managed.
PATCHABLE_FIELDS: dict[type, frozenset[str]] = {
    Member: frozenset({"name", "email", "join_date", "membership_type"}),
    GymClass: frozenset({"name", "description", "start_time", "end_time", "trainer_id", "capacity"}),
    Trainer: frozenset({"name", "email", "specializations"}),
}

R = TypeVar("R", Member, GymClass, Trainer)


def last_touched(record: R) -> int:
    """The newest timestamp already stored on ``record``."""
    return max(record.created_at, record.updated_at or 0)


def merge(record: R, changes: Mapping[str, Any], now: int) -> R:
    """
    Return a copy of ``record`` with ``changes`` applied and ``updated_at`` set.

    Fields missing from ``changes`` keep their stored value. ``updated_at``
    never moves behind the record's existing timestamps, even when ``now``
    comes from a clock that started after the record was written (a restart,
    or rows migrated from another host). Raises ValueError if ``changes``
    names a field that is not patchable for the record type.
    """
    allowed = PATCHABLE_FIELDS[type(record)]
    unknown = set(changes) - allowed
    if unknown:
        raise ValueError(f"Fields not patchable on {type(record).__name__}: {sorted(unknown)}")
    values = dict(changes)
    if "specializations" in values:
        values["specializations"] = list(values["specializations"])
    return replace(record, **values, updated_at=max(now, last_touched(record)))
