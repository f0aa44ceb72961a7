from __future__ import annotations

from typing import Iterable, Optional, Sequence

from ..core.exceptions import ValidationError
from .model import Trainer
from .repository import TrainerRepository


class InMemoryTrainerRepository(TrainerRepository):
    def __init__(self, trainers: Iterable[Trainer] = ()):
        self._by_id: dict[str, Trainer] = {t.trainer_id: t for t in trainers}

    def list(self) -> Sequence[Trainer]:
        return list(self._by_id.values())

    def get_by_id(self, trainer_id: str) -> Optional[Trainer]:
        return self._by_id.get(trainer_id)

    def insert(self, trainer: Trainer) -> Trainer:
        if trainer.trainer_id in self._by_id:
            raise ValidationError(f"Trainer {trainer.trainer_id} already exists")
        self._by_id[trainer.trainer_id] = trainer
        return trainer

    def update(self, trainer: Trainer) -> bool:
        if trainer.trainer_id not in self._by_id:
            return False
        self._by_id[trainer.trainer_id] = trainer
        return True

    def delete(self, trainer_id: str) -> bool:
        return self._by_id.pop(trainer_id, None) is not None
