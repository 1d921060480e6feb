"""Trainer use cases: CRUD and the availability check against scheduled classes."""

from __future__ import annotations

import logging

from gym_api.domain import queries, validation
from gym_api.domain.errors import NotFoundError
from gym_api.domain.records import Trainer
from gym_api.schemas.trainer import TrainerCreate, TrainerUpdate
from gym_api.services.base import RecordService

logger = logging.getLogger(__name__)


class TrainerService(RecordService[Trainer]):
    collection_name = "trainers"
    label = "trainer"

    def list_trainers(self) -> list[Trainer]:
        return self._list()

    def get_trainer(self, trainer_id: str) -> Trainer:
        return self._get(trainer_id)

    def add_trainer(self, payload: TrainerCreate) -> Trainer:
        validation.validate_trainer_payload(payload)
        return self._create(
            lambda record_id, now: Trainer(
                id=record_id,
                name=payload.name,
                email=payload.email,
                specializations=list(payload.specializations),
                created_at=now,
            )
        )

    def update_trainer(self, trainer_id: str, patch: TrainerUpdate) -> Trainer:
        changes = validation.validate_update(trainer_id, patch, entity=self.label)
        return self._update(trainer_id, changes, action="update a trainer")

    def delete_trainer(self, trainer_id: str) -> Trainer:
        return self._delete(trainer_id)

    def check_availability(self, trainer_id: str, start_time: str, end_time: str) -> bool:
        """
        True when the trainer exists and none of their classes starts or ends
        inside ``[start_time, end_time]``.
        """
        validation.validate_availability(trainer_id, start_time, end_time)
        gym_classes = self.repository.gym_classes
        # trainers before classes, the only order these two locks are taken in
        with self.collection.lock, gym_classes.lock:
            if self.collection.get(trainer_id) is None:
                raise NotFoundError(f"Trainer with id={trainer_id} not found")
            conflicts = queries.conflicting_classes(gym_classes.values(), trainer_id, start_time, end_time)
        if conflicts:
            logger.debug(
                "trainer %s busy between %s and %s: %s",
                trainer_id,
                start_time,
                end_time,
                [c.id for c in conflicts],
            )
        return not conflicts
