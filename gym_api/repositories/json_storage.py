"""
JSON-file persistence adapter.

All three collections live in one UTF-8 document, one object per
collection keyed by record id. Every mutation rewrites the file before
returning, so a fresh process reading the same path sees it.
"""

from __future__ import annotations

import json
import os
import tempfile
import threading
from dataclasses import asdict
from pathlib import Path
from typing import Generic, Optional, TypeVar

from gym_api.domain.records import GymClass, Member, Trainer

COLLECTIONS = ("members", "gym_classes", "trainers")

R = TypeVar("R", Member, GymClass, Trainer)


def db_defaults(db: dict) -> dict:
    for name in COLLECTIONS:
        db.setdefault(name, {})
    return db


class JsonDocument:
    """The data file shared by the collections; ``lock`` guards read-modify-write."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        self.lock = threading.RLock()

    def load(self) -> dict:
        if self.path.exists():
            with self.path.open("r", encoding="utf-8") as f:
                return db_defaults(json.load(f))
        return db_defaults({})

    def save(self, db: dict) -> None:
        """Replace the file atomically so a crash mid-write leaves the old document intact."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        fd, tmp_name = tempfile.mkstemp(prefix=f".{self.path.name}.", suffix=".tmp", dir=self.path.parent)
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as f:
                json.dump(db, f, ensure_ascii=False, indent=2)
                f.flush()
                os.fsync(f.fileno())
            os.replace(tmp_name, self.path)
        except BaseException:
            Path(tmp_name).unlink(missing_ok=True)
            raise


class JsonCollection(Generic[R]):
    def __init__(self, document: JsonDocument, key: str, record_type: type[R]) -> None:
        self.document = document
        self.key = key
        self.record_type = record_type
        self.lock = threading.RLock()

    def insert(self, record_id: str, record: R) -> None:
        data = asdict(record)
        data["id"] = record_id
        with self.lock, self.document.lock:
            db = self.document.load()
            db[self.key][record_id] = data
            self.document.save(db)

    def get(self, record_id: str) -> Optional[R]:
        with self.document.lock:
            data = self.document.load()[self.key].get(record_id)
        return self.record_type(**data) if data is not None else None

    def values(self) -> list[R]:
        with self.document.lock:
            items = list(self.document.load()[self.key].values())
        return [self.record_type(**data) for data in items]

    def remove(self, record_id: str) -> Optional[R]:
        with self.lock, self.document.lock:
            db = self.document.load()
            data = db[self.key].pop(record_id, None)
            if data is None:
                return None
            self.document.save(db)
        return self.record_type(**data)


class JsonRepository:
    """The three gym collections stored in a single JSON file."""

    backend = "json"

    def __init__(self, path: str | Path) -> None:
        self.document = JsonDocument(path)
        self.members: JsonCollection[Member] = JsonCollection(self.document, "members", Member)
        self.gym_classes: JsonCollection[GymClass] = JsonCollection(self.document, "gym_classes", GymClass)
        self.trainers: JsonCollection[Trainer] = JsonCollection(self.document, "trainers", Trainer)
