"""Create (or rebuild) the members, gym_classes and trainers tables."""
from __future__ import annotations

import argparse

from sqlalchemy.exc import SQLAlchemyError

from .session import Base, get_engine
from . import models  # noqa: F401  # registers the gym tables on Base.metadata

GYM_TABLES = ("members", "gym_classes", "trainers")


def create_all() -> list[str]:
    """Create any missing gym table; existing tables and rows are left alone."""
    engine = get_engine()
    Base.metadata.create_all(bind=engine)
    return sorted(Base.metadata.tables)


def reset_all() -> list[str]:
    """Drop every gym table and create it again empty."""
    engine = get_engine()
    Base.metadata.drop_all(bind=engine)
    return create_all()


def main() -> None:
    parser = argparse.ArgumentParser(description="Create the gym database schema.")
    parser.add_argument("--reset", action="store_true", help="drop existing tables first (deletes all records)")
    args = parser.parse_args()
    try:
        tables = reset_all() if args.reset else create_all()
    except SQLAlchemyError as exc:
        raise SystemExit(f"Failed to create tables: {exc}") from exc
    print(f"Tables ready: {', '.join(tables)}")


if __name__ == "__main__":
    main()
