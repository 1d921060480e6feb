from __future__ import annotations

from typing import List

from fastapi import APIRouter, Request, status

from gym_api.schemas.member import FieldValue, MemberCreate, MemberRead, MemberUpdate
from gym_api.services.member_service import MemberService

router = APIRouter(prefix="/members", tags=["members"])


def _get_member_service(request: Request) -> MemberService:
    svc = getattr(getattr(request.app, "state", None), "member_service", None)
    if not svc:
        raise RuntimeError("MemberService not configured")
    return svc


@router.get("", response_model=List[MemberRead])
def list_members(request: Request):
    return _get_member_service(request).list_members()


@router.get("/search", response_model=List[MemberRead])
def search_members(request: Request, q: str = ""):
    return _get_member_service(request).search_members(q)


@router.get("/{member_id}", response_model=MemberRead)
def get_member(member_id: str, request: Request):
    return _get_member_service(request).get_member(member_id)


@router.post("", response_model=MemberRead, status_code=status.HTTP_201_CREATED)
def add_member(payload: MemberCreate, request: Request):
    return _get_member_service(request).add_member(payload)


@router.put("/{member_id}", response_model=MemberRead)
def update_member(member_id: str, patch: MemberUpdate, request: Request):
    return _get_member_service(request).update_member(member_id, patch)


@router.patch("/{member_id}/membership-type", response_model=MemberRead)
def update_membership_type(member_id: str, body: FieldValue, request: Request):
    return _get_member_service(request).update_membership_type(member_id, body.value)


@router.patch("/{member_id}/email", response_model=MemberRead)
def update_member_email(member_id: str, body: FieldValue, request: Request):
    return _get_member_service(request).update_member_email(member_id, body.value)


@router.patch("/{member_id}/name", response_model=MemberRead)
def update_member_name(member_id: str, body: FieldValue, request: Request):
    return _get_member_service(request).update_member_name(member_id, body.value)


@router.delete("/{member_id}", response_model=MemberRead)
def delete_member(member_id: str, request: Request):
    return _get_member_service(request).delete_member(member_id)
