"""Gym class use cases: CRUD and the start-time filter."""

from __future__ import annotations

from gym_api.domain import queries, validation
from gym_api.domain.records import GymClass
from gym_api.schemas.gym_class import GymClassCreate, GymClassUpdate
from gym_api.services.base import RecordService


class GymClassService(RecordService[GymClass]):
    collection_name = "gym_classes"
    label = "gym class"

    def list_classes(self) -> list[GymClass]:
        return self._list()

    def get_class(self, class_id: str) -> GymClass:
        return self._get(class_id)

    def add_class(self, payload: GymClassCreate) -> GymClass:
        # trainer_id is stored as given; it is not looked up in the trainers collection
        validation.validate_gym_class_payload(payload)
        return self._create(
            lambda record_id, now: GymClass(
                id=record_id,
                name=payload.name,
                description=payload.description or "",
                start_time=payload.start_time,
                end_time=payload.end_time,
                trainer_id=payload.trainer_id,
                capacity=payload.capacity,
                created_at=now,
            )
        )

    def update_class(self, class_id: str, patch: GymClassUpdate) -> GymClass:
        changes = validation.validate_update(class_id, patch, entity=self.label)
        return self._update(class_id, changes, action="update a gym class")

    def delete_class(self, class_id: str) -> GymClass:
        return self._delete(class_id)

    def filter_by_start_time(self, start_time: str) -> list[GymClass]:
        validation.validate_start_time(start_time)
        return queries.filter_by_start_time(self.collection.values(), start_time)
