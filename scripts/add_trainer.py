#!/usr/bin/env python3
"""
Register a trainer directly in the configured storage backend.

Usage:
  python scripts/add_trainer.py --name "Sam Lee" --email sam@example.com \
      --specialization yoga [--specialization pilates]
"""
from __future__ import annotations

import argparse
import sys

from gym_api.core.config import get_settings
from gym_api.domain.errors import ValidationError
from gym_api.repositories import build_repository
from gym_api.schemas.trainer import TrainerCreate
from gym_api.services.trainer_service import TrainerService


def main(argv: list[str] | None = None) -> None:
    ap = argparse.ArgumentParser(description="Register a trainer")
    ap.add_argument("--name", required=True, help="Trainer name")
    ap.add_argument("--email", required=True, help="Trainer e-mail")
    ap.add_argument(
        "--specialization",
        action="append",
        default=[],
        help="Specialization (repeat for more than one)",
    )
    args = ap.parse_args(argv)

    svc = TrainerService(build_repository(get_settings()))
    payload = TrainerCreate(
        name=(args.name or "").strip(),
        email=(args.email or "").strip(),
        specializations=[s.strip() for s in args.specialization if s.strip()],
    )
    try:
        trainer = svc.add_trainer(payload)
    except ValidationError as exc:
        raise SystemExit(exc.message)
    print("OK: trainer registered")
    print(f"  ID: {trainer.id}")
    print(f"  Name: {trainer.name}")
    print(f"  Specializations: {', '.join(trainer.specializations)}")


if __name__ == "__main__":
    try:
        main()
    except Exception as exc:  # pragma: no cover - CLI usage
        sys.stderr.write(f"Error: {exc}\n")
        raise SystemExit(1)
