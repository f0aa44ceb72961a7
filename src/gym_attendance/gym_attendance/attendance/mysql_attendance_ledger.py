from __future__ import annotations

from datetime import date
from typing import Callable, Sequence

from ..common.datetime_utils import end_of_day, start_of_day
from ..core.exceptions import DuplicateCheckInError, NotFoundError, StoreError
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, is_duplicate_key
from .model import CheckInRecord, ReportFilter
from .repository import AttendanceLedger

_VISIT_KEY = "uq_checkins_resident_day"

_COLUMNS = "record_id, resident_id, resident_name, trainer_id, trainer_name, checked_in_at"


def _to_record(row: dict) -> CheckInRecord:
    return CheckInRecord(
        record_id=str(row["record_id"]),
        resident_id=str(row["resident_id"]),
        resident_name=row["resident_name"],
        trainer_id=str(row["trainer_id"]),
        trainer_name=row["trainer_name"],
        timestamp=row["checked_in_at"],
    )


def _escape_like(value: str) -> str:
    return value.replace("\\", "\\\\").replace("%", "\\%").replace("_", "\\_")


class MySQLAttendanceLedger(AttendanceLedger):
    """Check-in ledger on the ``checkins`` table.

    The ``uq_checkins_resident_day`` key on (resident_id, visit_date) is what
    actually guarantees one visit per resident per day under concurrent
    front-desk sessions.
    """

    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def insert(self, record: CheckInRecord) -> CheckInRecord:
        try:
            with db_cursor(self._conn_factory) as (_, cur):
                cur.execute(
                    f"""
                    INSERT INTO checkins({_COLUMNS}, visit_date)
                    VALUES(%s,%s,%s,%s,%s,%s,%s)
                    """,
                    (
                        record.record_id,
                        record.resident_id,
                        record.resident_name,
                        record.trainer_id,
                        record.trainer_name,
                        record.timestamp.replace(microsecond=0),
                        record.visit_date,
                    ),
                )
        except StoreError as exc:
            if is_duplicate_key(exc, _VISIT_KEY):
                raise DuplicateCheckInError(
                    f"{record.resident_name} has already checked in on {record.visit_date}"
                ) from exc
            raise
        return record

    def get_all(self) -> Sequence[CheckInRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM checkins")
            return [_to_record(r) for r in fetchall(cur)]

    def get_for_date(self, day: date) -> Sequence[CheckInRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM checkins WHERE visit_date=%s", (day,))
            return [_to_record(r) for r in fetchall(cur)]

    def delete_by_id(self, record_id: str) -> None:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM checkins WHERE record_id=%s", (record_id,))
            deleted = cur.rowcount
        if deleted == 0:
            raise NotFoundError(f"Check-in record {record_id} not found")

    def delete_where(self, predicate: Callable[[CheckInRecord], bool]) -> int:
        # Select and delete in one transaction so a failure deletes nothing.
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM checkins FOR UPDATE")
            doomed = [r.record_id for r in map(_to_record, fetchall(cur)) if predicate(r)]
            if doomed:
                placeholders = ",".join(["%s"] * len(doomed))
                cur.execute(f"DELETE FROM checkins WHERE record_id IN ({placeholders})", tuple(doomed))
            return len(doomed)

    def filter(self, criteria: ReportFilter) -> Sequence[CheckInRecord]:
        clauses: list[str] = []
        params: list[object] = []

        if criteria.start_date is not None:
            clauses.append("checked_in_at >= %s")
            params.append(start_of_day(criteria.start_date))
        if criteria.end_date is not None:
            clauses.append("checked_in_at <= %s")
            params.append(end_of_day(criteria.end_date))
        if criteria.trainer_id:
            clauses.append("trainer_id=%s")
            params.append(criteria.trainer_id)
        if criteria.resident_name_contains and criteria.resident_name_contains.strip():
            # Column collation is case-insensitive.
            clauses.append("resident_name LIKE %s")
            params.append(f"%{_escape_like(criteria.resident_name_contains.strip())}%")

        where = f"WHERE {' AND '.join(clauses)}" if clauses else ""

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM checkins {where}", tuple(params))
            return [_to_record(r) for r in fetchall(cur)]
