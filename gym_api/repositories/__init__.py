"""
Persistence adapters.

Each repository exposes ``members``, ``gym_classes`` and ``trainers``
collections with the same contract (insert/get/values/remove plus a
``lock``). Services depend on that contract, not on SQL or the JSON file.
"""
from __future__ import annotations

from typing import Optional, Protocol, TypeVar

from gym_api.core.config import Settings, STORAGE_BACKENDS
from gym_api.repositories.json_storage import JsonRepository
from gym_api.repositories.sql_repository import SQLRepository

R = TypeVar("R")


class Collection(Protocol[R]):
    lock: object

    def insert(self, record_id: str, record: R) -> None: ...

    def get(self, record_id: str) -> Optional[R]: ...

    def values(self) -> list[R]: ...

    def remove(self, record_id: str) -> Optional[R]: ...


def build_repository(settings: Settings) -> SQLRepository | JsonRepository:
    """Pick the backend named by ``STORAGE_BACKEND``; SQL tables are created if missing."""
    backend = settings.storage_backend
    if backend not in STORAGE_BACKENDS:
        raise RuntimeError(f"Unknown STORAGE_BACKEND {backend!r}; expected one of {sorted(STORAGE_BACKENDS)}")
    if backend == "json":
        return JsonRepository(settings.json_data_file)
    from gym_api.db.create_tables import create_all

    create_all()
    return SQLRepository()


__all__ = ["Collection", "JsonRepository", "SQLRepository", "build_repository"]
