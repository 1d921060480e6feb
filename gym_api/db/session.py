"""
Engine and unit-of-work helpers for the SQL backend.

Collections open one ``session_scope()`` per store operation; the scope
commits when the block exits cleanly and rolls back otherwise.
"""
from __future__ import annotations

from contextlib import contextmanager
from functools import lru_cache
from typing import Iterator

from sqlalchemy import create_engine
from sqlalchemy.engine import make_url
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from gym_api.core.config import get_settings

Base = declarative_base()


def engine_options(url: str) -> dict:
    """Keyword arguments for ``create_engine`` tuned to the database dialect."""
    options: dict = {"future": True, "pool_pre_ping": True}
    if make_url(url).get_backend_name() == "sqlite":
        # sync FastAPI endpoints run in a threadpool, so a pooled connection
        # may be used by a thread other than the one that opened it
        options["connect_args"] = {"check_same_thread": False, "timeout": 30}
    return options


@lru_cache
def get_engine():
    url = (get_settings().database_url or "").strip()
    if not url:
        raise RuntimeError("DATABASE_URL must be configured to use the SQL backend.")
    return create_engine(url, **engine_options(url))


@lru_cache
def _get_sessionmaker():
    # records are converted to dataclasses before the session closes
    return sessionmaker(bind=get_engine(), autoflush=False, expire_on_commit=False, future=True)


@contextmanager
def session_scope() -> Iterator[Session]:
    session: Session = _get_sessionmaker()()
    try:
        yield session
        session.commit()
    except Exception:
        session.rollback()
        raise
    finally:
        session.close()
