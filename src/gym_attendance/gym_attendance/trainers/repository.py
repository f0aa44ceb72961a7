from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import Trainer


class TrainerRepository(Protocol):
    def list(self) -> Sequence[Trainer]:
        raise NotImplementedError

    def get_by_id(self, trainer_id: str) -> Optional[Trainer]:
        raise NotImplementedError

    def insert(self, trainer: Trainer) -> Trainer:
        raise NotImplementedError

    def update(self, trainer: Trainer) -> bool:
        raise NotImplementedError

    def delete(self, trainer_id: str) -> bool:
        raise NotImplementedError
