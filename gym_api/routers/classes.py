from __future__ import annotations

from typing import List

from fastapi import APIRouter, Request, status

from gym_api.schemas.gym_class import GymClassCreate, GymClassRead, GymClassUpdate
from gym_api.services.gym_class_service import GymClassService

router = APIRouter(prefix="/classes", tags=["classes"])


def _get_class_service(request: Request) -> GymClassService:
    svc = getattr(getattr(request.app, "state", None), "gym_class_service", None)
    if not svc:
        raise RuntimeError("GymClassService not configured")
    return svc


@router.get("", response_model=List[GymClassRead])
def list_classes(request: Request):
    return _get_class_service(request).list_classes()


@router.get("/by-start-time", response_model=List[GymClassRead])
def filter_by_start_time(request: Request, start_time: str = ""):
    return _get_class_service(request).filter_by_start_time(start_time)


@router.get("/{class_id}", response_model=GymClassRead)
def get_class(class_id: str, request: Request):
    return _get_class_service(request).get_class(class_id)


@router.post("", response_model=GymClassRead, status_code=status.HTTP_201_CREATED)
def add_class(payload: GymClassCreate, request: Request):
    return _get_class_service(request).add_class(payload)


@router.put("/{class_id}", response_model=GymClassRead)
def update_class(class_id: str, patch: GymClassUpdate, request: Request):
    return _get_class_service(request).update_class(class_id, patch)


@router.delete("/{class_id}", response_model=GymClassRead)
def delete_class(class_id: str, request: Request):
    return _get_class_service(request).delete_class(class_id)
