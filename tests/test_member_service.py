from __future__ import annotations

import time

import pytest

from gym_api.core.utils import MonotonicClock
from gym_api.domain.errors import NotFoundError, ValidationError
from gym_api.domain.records import Member
from gym_api.schemas.member import MemberCreate, MemberUpdate
from gym_api.services import MemberService


def _payload(**overrides) -> MemberCreate:
    data = {"name": "Jo", "email": "jo@x.com", "join_date": "2024-01-01", "membership_type": "gold"}
    data.update(overrides)
    return MemberCreate(**data)


def test_member_lifecycle(member_service):
    member = member_service.add_member(_payload())
    assert member.id
    assert member.updated_at is None
    assert member_service.get_member(member.id) == member

    upgraded = member_service.update_membership_type(member.id, "platinum")
    assert upgraded.membership_type == "platinum"
    assert upgraded.updated_at is not None

    deleted = member_service.delete_member(member.id)
    assert deleted == upgraded
    with pytest.raises(NotFoundError, match=f"Member with id={member.id} not found"):
        member_service.get_member(member.id)


def test_add_rejects_incomplete_payload_without_writing(member_service):
    with pytest.raises(ValidationError):
        member_service.add_member(_payload(email=""))
    assert member_service.list_members() == []


def test_full_update_keeps_id_and_created_at(member_service):
    member = member_service.add_member(_payload())
    first = member_service.update_member(member.id, MemberUpdate(name="Joanne", join_date="2024-02-02"))
    second = member_service.update_member(member.id, MemberUpdate(email="joanne@x.com"))

    assert first.id == second.id == member.id
    assert first.created_at == second.created_at == member.created_at
    assert first.updated_at > member.created_at
    assert second.updated_at >= first.updated_at
    assert second.name == "Joanne"
    assert second.join_date == "2024-02-02"
    assert second.email == "joanne@x.com"
    assert second.membership_type == "gold"
    assert member_service.get_member(member.id) == second


def test_full_update_errors(member_service):
    member = member_service.add_member(_payload())
    with pytest.raises(ValidationError, match="Invalid member ID"):
        member_service.update_member("", MemberUpdate(name="x"))
    with pytest.raises(ValidationError, match="At least one field"):
        member_service.update_member(member.id, MemberUpdate())
    with pytest.raises(NotFoundError, match="Couldn't update a member with id=missing. Member not found"):
        member_service.update_member("missing", MemberUpdate(name="x"))
    assert member_service.get_member(member.id).updated_at is None


def test_field_updates(member_service):
    member = member_service.add_member(_payload())
    assert member_service.update_member_email(member.id, "new@x.com").email == "new@x.com"
    renamed = member_service.update_member_name(member.id, "Joe")
    assert renamed.name == "Joe"
    assert renamed.email == "new@x.com"


@pytest.mark.parametrize(
    "method, message",
    [
        ("update_membership_type", "membership type for member"),
        ("update_member_email", "email for member"),
        ("update_member_name", "name for member"),
    ],
)
def test_field_update_on_missing_member(member_service, method, message):
    with pytest.raises(NotFoundError, match=message):
        getattr(member_service, method)("missing", "value")


@pytest.mark.parametrize("method", ["update_membership_type", "update_member_email", "update_member_name"])
def test_field_update_rejects_empty_value(member_service, method):
    member = member_service.add_member(_payload())
    with pytest.raises(ValidationError):
        getattr(member_service, method)(member.id, "")
    with pytest.raises(ValidationError, match="Invalid member ID"):
        getattr(member_service, method)("", "value")


def test_delete_missing_member(member_service):
    with pytest.raises(NotFoundError, match="Couldn't delete a member with id=nope. Member not found."):
        member_service.delete_member("nope")


def test_search_members(member_service):
    alice = member_service.add_member(_payload(name="Alice Smith", email="a@x.com"))
    bob = member_service.add_member(_payload(name="Bob", email="bob@alice.org"))
    member_service.add_member(_payload(name="Carol", email="carol@x.com"))

    assert member_service.search_members("alice") == [alice, bob]
    with pytest.raises(ValidationError):
        member_service.search_members("   ")


def test_list_members_returns_every_record(member_service):
    ids = [member_service.add_member(_payload(name=f"M{i}")).id for i in range(3)]
    assert [m.id for m in member_service.list_members()] == ids


def test_update_after_restart_keeps_updated_at_monotonic(repo):
    # a record written by a process whose clock ran ahead of this one
    far_future = time.time_ns() + 10**12
    repo.members.insert(
        "m1",
        Member(
            id="m1",
            name="Jo",
            email="jo@x.com",
            join_date="2024-01-01",
            membership_type="gold",
            created_at=far_future - 5,
            updated_at=far_future,
        ),
    )
    service = MemberService(repo, clock=MonotonicClock())

    updated = service.update_membership_type("m1", "platinum")

    assert updated.updated_at >= far_future
    assert updated.updated_at >= updated.created_at
    assert repo.members.get("m1").updated_at == updated.updated_at
