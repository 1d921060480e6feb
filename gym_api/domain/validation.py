"""
Stateless checks applied to inbound payloads before they reach a collection.

Every function raises ValidationError on failure and never touches storage.
"""
from __future__ import annotations

from typing import Any, Iterable

from pydantic import BaseModel

from gym_api.domain.errors import ValidationError

MEMBER_REQUIRED = ("name", "email", "join_date", "membership_type")
GYM_CLASS_REQUIRED = ("name", "start_time", "end_time", "trainer_id", "capacity")
TRAINER_REQUIRED = ("name", "email", "specializations")


def is_blank(value: Any) -> bool:
    """Missing, empty string, zero or empty list all count as blank."""
    if value is None:
        return True
    if isinstance(value, bool):
        return False
    if isinstance(value, (str, list, tuple, set, dict)):
        return len(value) == 0
    if isinstance(value, (int, float)):
        return value == 0
    return False


def _require(payload: BaseModel | None, fields: Iterable[str], message: str) -> None:
    if payload is None:
        raise ValidationError(message)
    for name in fields:
        if is_blank(getattr(payload, name, None)):
            raise ValidationError(message)


def validate_member_payload(payload: BaseModel | None) -> None:
    _require(payload, MEMBER_REQUIRED, "Invalid member payload. All fields are required.")


def validate_gym_class_payload(payload: BaseModel | None) -> None:
    message = "Invalid gym class payload. All fields are required."
    _require(payload, GYM_CLASS_REQUIRED, message)
    if payload.capacity < 0:
        raise ValidationError("Invalid gym class payload. Capacity must be a positive integer.")


def validate_trainer_payload(payload: BaseModel | None) -> None:
    _require(
        payload,
        TRAINER_REQUIRED,
        "Invalid trainer payload. Name, email, and at least one specialization are required.",
    )


def validate_update(record_id: str | None, patch: BaseModel | None, *, entity: str) -> dict[str, Any]:
    """
    Check a full-update request and return the fields it changes.

    Only fields the caller actually set (and did not set to null) count; a
    patch with none of them is rejected.
    """
    if not record_id:
        raise ValidationError(f"Invalid {entity} ID.")
    changes = patch.model_dump(exclude_unset=True, exclude_none=True) if patch is not None else {}
    if not changes:
        raise ValidationError("Invalid payload. At least one field must be provided for update.")
    return changes


def validate_field_update(record_id: str | None, value: str | None, *, entity: str, label: str) -> None:
    if not record_id:
        raise ValidationError(f"Invalid {entity} ID.")
    if not value:
        raise ValidationError(f"Invalid {label.lower()}. {label} field is required.")


def validate_search_query(query: str | None) -> None:
    if not query or not query.strip():
        raise ValidationError("Invalid search query. Query must not be empty.")


def validate_start_time(start_time: str | None) -> None:
    if not start_time:
        raise ValidationError("Invalid start time. Start time is required.")


def validate_availability(trainer_id: str | None, start_time: str | None, end_time: str | None) -> None:
    if not trainer_id:
        raise ValidationError("Invalid trainer ID.")
    if not start_time or not end_time:
        raise ValidationError("Invalid start time or end time.")
