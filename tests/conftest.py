from __future__ import annotations

import itertools
import sys
from pathlib import Path

import pytest

# Make the gym_api package importable for local test runs
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from gym_api.core import config as core_config  # noqa: E402
from gym_api.db import create_tables  # noqa: E402
from gym_api.db import session as db_session  # noqa: E402
from gym_api.repositories.json_storage import JsonRepository  # noqa: E402
from gym_api.repositories.sql_repository import SQLRepository  # noqa: E402
from gym_api.services import GymClassService, MemberService, TrainerService  # noqa: E402


class FakeClock:
    """Deterministic clock: every call returns the previous value plus ``step``."""

    def __init__(self, start: int = 1_000, step: int = 1) -> None:
        self.value = start
        self.step = step

    def now(self) -> int:
        self.value += self.step
        return self.value


def _reset_sql_caches() -> None:
    core_config.get_settings.cache_clear()
    db_session.get_engine.cache_clear()
    db_session._get_sessionmaker.cache_clear()  # type: ignore[attr-defined]


@pytest.fixture()
def temp_db(tmp_path, monkeypatch):
    """Point DATABASE_URL at a temporary SQLite file and reset settings/engine caches."""
    db_file = tmp_path / "test.db"
    monkeypatch.setenv("DATABASE_URL", f"sqlite:///{db_file}")
    monkeypatch.setenv("STORAGE_BACKEND", "sql")
    _reset_sql_caches()

    create_tables.reset_all()

    yield db_file

    db_session.get_engine().dispose()
    _reset_sql_caches()


@pytest.fixture()
def sql_repo(temp_db):
    return SQLRepository()


@pytest.fixture()
def json_file(tmp_path):
    return tmp_path / "gym_data.json"


@pytest.fixture()
def json_repo(json_file):
    return JsonRepository(json_file)


@pytest.fixture(params=["sql", "json"])
def repo(request):
    """Run the test once per storage backend."""
    return request.getfixturevalue(f"{request.param}_repo")


@pytest.fixture()
def clock():
    return FakeClock()


@pytest.fixture()
def id_factory():
    counter = itertools.count(1)
    return lambda: f"id-{next(counter)}"


@pytest.fixture()
def member_service(repo, clock, id_factory):
    return MemberService(repo, clock=clock, id_factory=id_factory)


@pytest.fixture()
def class_service(repo, clock, id_factory):
    return GymClassService(repo, clock=clock, id_factory=id_factory)


@pytest.fixture()
def trainer_service(repo, clock, id_factory):
    return TrainerService(repo, clock=clock, id_factory=id_factory)
