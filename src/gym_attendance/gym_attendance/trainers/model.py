from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Trainer:
    """Domain entity: a trainer who supervises gym sessions."""

    trainer_id: str
    name: str
    active: bool = True
