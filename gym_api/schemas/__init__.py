"""
Pydantic schema definitions for API payloads.

Each entity (members, gym classes, trainers) defines a create payload,
an update patch naming the fields a caller may overwrite, and a read
model for responses. Schemas are separate from the stored records in
``gym_api.domain.records`` and from the SQL rows in ``gym_api.db.models``.
"""

from .gym_class import GymClassCreate, GymClassRead, GymClassUpdate
from .member import FieldValue, MemberCreate, MemberRead, MemberUpdate
from .trainer import Availability, TrainerCreate, TrainerRead, TrainerUpdate

__all__ = [
    "Availability",
    "FieldValue",
    "GymClassCreate",
    "GymClassRead",
    "GymClassUpdate",
    "MemberCreate",
    "MemberRead",
    "MemberUpdate",
    "TrainerCreate",
    "TrainerRead",
    "TrainerUpdate",
]
