from __future__ import annotations

from typing import Optional, Sequence

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Trainer
from .repository import TrainerRepository


def _to_trainer(row: dict) -> Trainer:
    return Trainer(
        trainer_id=str(row["trainer_id"]),
        name=row["name"],
        active=bool(row.get("is_active", True)),
    )


class MySQLTrainerRepository(TrainerRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list(self) -> Sequence[Trainer]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT trainer_id, name, is_active FROM trainers ORDER BY name")
            return [_to_trainer(r) for r in fetchall(cur)]

    def get_by_id(self, trainer_id: str) -> Optional[Trainer]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT trainer_id, name, is_active FROM trainers WHERE trainer_id=%s", (trainer_id,))
            row = fetchone(cur)
            return _to_trainer(row) if row else None

    def insert(self, trainer: Trainer) -> Trainer:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "INSERT INTO trainers(trainer_id, name, is_active) VALUES(%s,%s,%s)",
                (trainer.trainer_id, trainer.name, int(trainer.active)),
            )
        return trainer

    def update(self, trainer: Trainer) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT trainer_id FROM trainers WHERE trainer_id=%s FOR UPDATE", (trainer.trainer_id,))
            if fetchone(cur) is None:
                return False
            cur.execute(
                "UPDATE trainers SET name=%s, is_active=%s WHERE trainer_id=%s",
                (trainer.name, int(trainer.active), trainer.trainer_id),
            )
            return True

    def delete(self, trainer_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM trainers WHERE trainer_id=%s", (trainer_id,))
            return cur.rowcount > 0
