from __future__ import annotations

from typing import Optional, Sequence

from ..core.enums import TrainingLimitation
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone
from .model import Resident
from .repository import ResidentRepository

_COLUMNS = "resident_id, first_name, last_name, medical_certificate_start_date, training_limitation, medical_conditions"


def _to_resident(row: dict) -> Resident:
    return Resident(
        resident_id=str(row["resident_id"]),
        first_name=row["first_name"],
        last_name=row["last_name"],
        medical_certificate_start_date=row["medical_certificate_start_date"],
        training_limitation=TrainingLimitation.parse(row.get("training_limitation")),
        medical_conditions=row.get("medical_conditions"),
    )


class MySQLResidentRepository(ResidentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list(self) -> Sequence[Resident]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM residents ORDER BY last_name, first_name")
            return [_to_resident(r) for r in fetchall(cur)]

    def get_by_id(self, resident_id: str) -> Optional[Resident]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM residents WHERE resident_id=%s", (resident_id,))
            row = fetchone(cur)
            return _to_resident(row) if row else None

    def insert(self, resident: Resident) -> Resident:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"""
                INSERT INTO residents({_COLUMNS})
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (
                    resident.resident_id,
                    resident.first_name,
                    resident.last_name,
                    resident.medical_certificate_start_date,
                    resident.training_limitation.value,
                    resident.medical_conditions,
                ),
            )
        return resident

    def update(self, resident: Resident) -> bool:
        # Unchanged rows report rowcount 0; existence is checked under a row lock.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT resident_id FROM residents WHERE resident_id=%s FOR UPDATE", (resident.resident_id,))
            if fetchone(cur) is None:
                return False
            cur.execute(
                """
                UPDATE residents
                SET first_name=%s, last_name=%s, medical_certificate_start_date=%s,
                    training_limitation=%s, medical_conditions=%s
                WHERE resident_id=%s
                """,
                (
                    resident.first_name,
                    resident.last_name,
                    resident.medical_certificate_start_date,
                    resident.training_limitation.value,
                    resident.medical_conditions,
                    resident.resident_id,
                ),
            )
            return True

    def delete(self, resident_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM residents WHERE resident_id=%s", (resident_id,))
            return cur.rowcount > 0
