from __future__ import annotations

import logging
import uuid
from dataclasses import replace
from typing import Optional

from ..common.validators import require_non_empty
from ..core.exceptions import NotFoundError
from .model import Trainer
from .repository import TrainerRepository

logger = logging.getLogger(__name__)


class TrainerService:
    """Use case: manage trainers (admin)."""

    def __init__(self, trainers: TrainerRepository):
        self._trainers = trainers

    def get(self, trainer_id: str) -> Trainer:
        trainer = self._trainers.get_by_id(trainer_id)
        if not trainer:
            raise NotFoundError(f"Trainer {trainer_id} not found")
        return trainer

    def list_trainers(self) -> list[Trainer]:
        return sorted(self._trainers.list(), key=lambda t: (t.name.casefold(), t.trainer_id))

    def list_active(self) -> list[Trainer]:
        """Trainers selectable for new check-ins."""
        return [t for t in self.list_trainers() if t.active]

    def create_trainer(self, *, name: str, active: bool = True) -> Trainer:
        trainer = Trainer(trainer_id=uuid.uuid4().hex, name=require_non_empty(name, "Trainer name"), active=bool(active))
        self._trainers.insert(trainer)
        logger.info("Created trainer %s (%s)", trainer.trainer_id, trainer.name)
        return trainer

    def update_trainer(self, trainer_id: str, *, name: Optional[str] = None, active: Optional[bool] = None) -> Trainer:
        current = self.get(trainer_id)
        updated = replace(
            current,
            name=require_non_empty(name, "Trainer name") if name is not None else current.name,
            active=bool(active) if active is not None else current.active,
        )
        if not self._trainers.update(updated):
            raise NotFoundError(f"Trainer {trainer_id} not found")
        return updated

    def set_active(self, trainer_id: str, active: bool) -> Trainer:
        trainer = self.update_trainer(trainer_id, active=active)
        logger.info("Trainer %s is now %s", trainer_id, "active" if active else "inactive")
        return trainer

    def delete_trainer(self, trainer_id: str) -> None:
        if not self._trainers.delete(trainer_id):
            raise NotFoundError(f"Trainer {trainer_id} not found")
        logger.info("Deleted trainer %s", trainer_id)
