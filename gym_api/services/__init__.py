"""
High-level use cases for the gym records API.

Each service validates its input, then reads/writes one repository
collection. Routers (FastAPI endpoints) call these services instead of
touching the repositories directly.
"""

from gym_api.services.gym_class_service import GymClassService
from gym_api.services.member_service import MemberService
from gym_api.services.trainer_service import TrainerService

__all__ = ["GymClassService", "MemberService", "TrainerService"]
