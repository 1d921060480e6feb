from __future__ import annotations

from typing import List

from fastapi import APIRouter, Request, status

from gym_api.schemas.trainer import Availability, TrainerCreate, TrainerRead, TrainerUpdate
from gym_api.services.trainer_service import TrainerService

router = APIRouter(prefix="/trainers", tags=["trainers"])


def _get_trainer_service(request: Request) -> TrainerService:
    svc = getattr(getattr(request.app, "state", None), "trainer_service", None)
    if not svc:
        raise RuntimeError("TrainerService not configured")
    return svc


@router.get("", response_model=List[TrainerRead])
def list_trainers(request: Request):
    return _get_trainer_service(request).list_trainers()


@router.get("/{trainer_id}", response_model=TrainerRead)
def get_trainer(trainer_id: str, request: Request):
    return _get_trainer_service(request).get_trainer(trainer_id)


@router.get("/{trainer_id}/availability", response_model=Availability)
def check_availability(trainer_id: str, request: Request, start_time: str = "", end_time: str = ""):
    available = _get_trainer_service(request).check_availability(trainer_id, start_time, end_time)
    return Availability(trainer_id=trainer_id, start_time=start_time, end_time=end_time, available=available)


@router.post("", response_model=TrainerRead, status_code=status.HTTP_201_CREATED)
def add_trainer(payload: TrainerCreate, request: Request):
    return _get_trainer_service(request).add_trainer(payload)


@router.put("/{trainer_id}", response_model=TrainerRead)
def update_trainer(trainer_id: str, patch: TrainerUpdate, request: Request):
    return _get_trainer_service(request).update_trainer(trainer_id, patch)


@router.delete("/{trainer_id}", response_model=TrainerRead)
def delete_trainer(trainer_id: str, request: Request):
    return _get_trainer_service(request).delete_trainer(trainer_id)
