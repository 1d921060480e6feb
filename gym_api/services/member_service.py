"""Member use cases: CRUD, single-field updates and text search."""

from __future__ import annotations

from gym_api.domain import queries, validation
from gym_api.domain.records import Member
from gym_api.schemas.member import MemberCreate, MemberUpdate
from gym_api.services.base import RecordService


class MemberService(RecordService[Member]):
    collection_name = "members"
    label = "member"

    def list_members(self) -> list[Member]:
        return self._list()

    def get_member(self, member_id: str) -> Member:
        return self._get(member_id)

    def add_member(self, payload: MemberCreate) -> Member:
        validation.validate_member_payload(payload)
        return self._create(
            lambda record_id, now: Member(
                id=record_id,
                name=payload.name,
                email=payload.email,
                join_date=payload.join_date,
                membership_type=payload.membership_type,
                created_at=now,
            )
        )

    def update_member(self, member_id: str, patch: MemberUpdate) -> Member:
        changes = validation.validate_update(member_id, patch, entity=self.label)
        return self._update(member_id, changes, action="update a member")

    def update_membership_type(self, member_id: str, membership_type: str) -> Member:
        validation.validate_field_update(member_id, membership_type, entity=self.label, label="Membership type")
        return self._update(
            member_id,
            {"membership_type": membership_type},
            action="update the membership type for member",
        )

    def update_member_email(self, member_id: str, email: str) -> Member:
        validation.validate_field_update(member_id, email, entity=self.label, label="Email")
        return self._update(member_id, {"email": email}, action="update the email for member")

    def update_member_name(self, member_id: str, name: str) -> Member:
        validation.validate_field_update(member_id, name, entity=self.label, label="Name")
        return self._update(member_id, {"name": name}, action="update the name for member")

    def delete_member(self, member_id: str) -> Member:
        return self._delete(member_id)

    def search_members(self, query: str) -> list[Member]:
        validation.validate_search_query(query)
        return queries.search_members(self.collection.values(), query)
