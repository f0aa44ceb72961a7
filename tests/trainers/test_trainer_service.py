from __future__ import annotations

import pytest

from src.gym_attendance.gym_attendance.core.exceptions import NotFoundError, ValidationError
from src.gym_attendance.gym_attendance.trainers.memory_trainer_repository import InMemoryTrainerRepository
from src.gym_attendance.gym_attendance.trainers.service import TrainerService


def test_list_active_excludes_inactive(trainers):
    svc = TrainerService(InMemoryTrainerRepository(trainers))

    assert [t.trainer_id for t in svc.list_active()] == ["t2", "t1"]
    assert len(svc.list_trainers()) == 3


def test_create_and_deactivate_trainer():
    svc = TrainerService(InMemoryTrainerRepository())

    trainer = svc.create_trainer(name="Theodor Shapir")
    svc.set_active(trainer.trainer_id, False)

    assert svc.get(trainer.trainer_id).active is False
    assert svc.list_active() == []


def test_create_trainer_requires_name():
    svc = TrainerService(InMemoryTrainerRepository())
    with pytest.raises(ValidationError):
        svc.create_trainer(name="  ")


def test_missing_trainer_raises_not_found():
    svc = TrainerService(InMemoryTrainerRepository())

    with pytest.raises(NotFoundError):
        svc.update_trainer("nope", name="X")
    with pytest.raises(NotFoundError):
        svc.delete_trainer("nope")
