from __future__ import annotations

import pytest

from src.gym_attendance.gym_attendance.core.exceptions import NotFoundError
from src.gym_attendance.gym_attendance.trainers.model import Trainer
from src.gym_attendance.gym_attendance.trainers.mysql_trainer_repository import MySQLTrainerRepository
from src.gym_attendance.gym_attendance.trainers.service import TrainerService

ROW = {"trainer_id": "t1", "name": "Ran Meged", "is_active": 1}


def test_activating_an_active_trainer_succeeds(fake_mysql):
    # Nothing changes, so MySQL reports rowcount 0 for the UPDATE.
    fake_mysql.queue([ROW], [{"trainer_id": "t1"}], 0)

    trainer = TrainerService(MySQLTrainerRepository(fake_mysql)).set_active("t1", True)

    assert trainer.active is True
    assert fake_mysql.executed[2] == (
        "UPDATE trainers SET name=%s, is_active=%s WHERE trainer_id=%s",
        ("Ran Meged", 1, "t1"),
    )


def test_update_of_missing_trainer_returns_false(fake_mysql):
    fake_mysql.queue([])

    assert MySQLTrainerRepository(fake_mysql).update(Trainer("gone", "Nobody")) is False
    assert len(fake_mysql.executed) == 1


def test_rename_of_unknown_trainer_is_not_found(fake_mysql):
    with pytest.raises(NotFoundError):
        TrainerService(MySQLTrainerRepository(fake_mysql)).update_trainer("gone", name="Nobody")
