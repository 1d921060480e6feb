"""One-off migration script: JSON data file -> SQL backend.

Usage:
  python scripts/migrate_json_to_sql.py [--json gym_data.json]

Ids and timestamps are kept as they are; inserts overwrite, so the
script can be rerun safely.
"""
from __future__ import annotations

import argparse
from pathlib import Path
import sys

# Make gym_api importable when run directly
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

from gym_api.core.config import get_settings
from gym_api.db.create_tables import create_all
from gym_api.repositories.json_storage import COLLECTIONS, JsonRepository
from gym_api.repositories.sql_repository import SQLRepository


def migrate(json_path: Path) -> dict[str, int]:
    if not json_path.exists():
        raise SystemExit(f"File not found: {json_path}")
    source = JsonRepository(json_path)
    create_all()
    target = SQLRepository()
    counts: dict[str, int] = {}
    for name in COLLECTIONS:
        src = getattr(source, name)
        dst = getattr(target, name)
        records = src.values()
        for record in records:
            dst.insert(record.id, record)
        counts[name] = len(records)
    return counts


def main() -> None:
    ap = argparse.ArgumentParser(description="Copy gym records from the JSON file into the SQL database")
    ap.add_argument("--json", help="JSON data file (default: JSON_DATA_FILE)")
    args = ap.parse_args()
    json_path = Path(args.json or get_settings().json_data_file)
    counts = migrate(json_path)
    for name, count in counts.items():
        print(f"  {name}: {count}")
    print("JSON data migrated to SQL successfully.")


if __name__ == "__main__":
    main()
