from __future__ import annotations

from datetime import date, datetime

import mysql.connector
import pytest

from src.gym_attendance.gym_attendance.attendance.model import CheckInRecord, ReportFilter
from src.gym_attendance.gym_attendance.attendance.mysql_attendance_ledger import MySQLAttendanceLedger
from src.gym_attendance.gym_attendance.core.exceptions import DuplicateCheckInError, NotFoundError, StoreError

RECORD = CheckInRecord(
    record_id="c1",
    resident_id="r1",
    resident_name="Arie Elzas",
    trainer_id="t1",
    trainer_name="Ran Meged",
    timestamp=datetime(2025, 1, 1, 9, 30, 15, 900000),
)


def _row(record_id, resident_id, name="Arie Elzas", moment=datetime(2025, 1, 1, 9, 30)):
    return {
        "record_id": record_id,
        "resident_id": resident_id,
        "resident_name": name,
        "trainer_id": "t1",
        "trainer_name": "Ran Meged",
        "checked_in_at": moment,
    }


def test_insert_commits_whole_second_timestamp(fake_mysql):
    MySQLAttendanceLedger(fake_mysql).insert(RECORD)

    sql, params = fake_mysql.executed[0]
    assert sql.startswith("INSERT INTO checkins")
    assert params[5] == datetime(2025, 1, 1, 9, 30, 15)
    assert params[6] == date(2025, 1, 1)
    assert fake_mysql.commits == 1


def test_duplicate_visit_key_becomes_duplicate_check_in(fake_mysql):
    fake_mysql.queue(
        mysql.connector.IntegrityError(
            msg="Duplicate entry 'r1-2025-01-01' for key 'checkins.uq_checkins_resident_day'",
            errno=1062,
        )
    )

    with pytest.raises(DuplicateCheckInError):
        MySQLAttendanceLedger(fake_mysql).insert(RECORD)
    assert (fake_mysql.commits, fake_mysql.rollbacks) == (0, 1)


def test_duplicate_record_id_is_a_store_error(fake_mysql):
    fake_mysql.queue(
        mysql.connector.IntegrityError(msg="Duplicate entry 'c1' for key 'checkins.PRIMARY'", errno=1062)
    )

    with pytest.raises(StoreError) as excinfo:
        MySQLAttendanceLedger(fake_mysql).insert(RECORD)
    assert not isinstance(excinfo.value, DuplicateCheckInError)


def test_other_connector_errors_roll_back_as_store_error(fake_mysql):
    fake_mysql.queue(mysql.connector.OperationalError(msg="Lost connection to MySQL server", errno=2013))

    with pytest.raises(StoreError):
        MySQLAttendanceLedger(fake_mysql).insert(RECORD)
    assert (fake_mysql.commits, fake_mysql.rollbacks) == (0, 1)


def test_filter_builds_where_clause_and_escapes_like(fake_mysql):
    fake_mysql.queue([_row("c1", "r1")])
    criteria = ReportFilter(
        start_date=date(2025, 1, 1),
        end_date=date(2025, 1, 31),
        trainer_id="t1",
        resident_name_contains=" 50%_off ",
    )

    records = MySQLAttendanceLedger(fake_mysql).filter(criteria)

    sql, params = fake_mysql.executed[0]
    assert sql.endswith(
        "WHERE checked_in_at >= %s AND checked_in_at <= %s AND trainer_id=%s AND resident_name LIKE %s"
    )
    assert params == (
        datetime(2025, 1, 1, 0, 0),
        datetime(2025, 1, 31, 23, 59, 59, 999999),
        "t1",
        "%50\\%\\_off%",
    )
    assert [r.record_id for r in records] == ["c1"]


def test_empty_filter_has_no_where_clause(fake_mysql):
    MySQLAttendanceLedger(fake_mysql).filter(ReportFilter())

    sql, params = fake_mysql.executed[0]
    assert sql.endswith("FROM checkins")
    assert params == ()


def test_delete_where_selects_and_deletes_in_one_transaction(fake_mysql):
    fake_mysql.queue([_row("c1", "r1"), _row("c2", "r2", name="Yosef On")], 1)

    removed = MySQLAttendanceLedger(fake_mysql).delete_where(lambda r: r.resident_id == "r2")

    assert removed == 1
    assert fake_mysql.statements()[0].endswith("FOR UPDATE")
    assert fake_mysql.executed[1] == ("DELETE FROM checkins WHERE record_id IN (%s)", ("c2",))
    assert fake_mysql.commits == 1


def test_delete_where_failure_deletes_nothing(fake_mysql):
    fake_mysql.queue(
        [_row("c1", "r1")],
        mysql.connector.OperationalError(msg="Lock wait timeout exceeded", errno=1205),
    )

    with pytest.raises(StoreError):
        MySQLAttendanceLedger(fake_mysql).delete_where(lambda r: True)
    assert (fake_mysql.commits, fake_mysql.rollbacks) == (0, 1)


def test_delete_where_without_matches_issues_no_delete(fake_mysql):
    fake_mysql.queue([_row("c1", "r1")])

    assert MySQLAttendanceLedger(fake_mysql).delete_where(lambda r: False) == 0
    assert len(fake_mysql.executed) == 1


def test_delete_missing_record_is_not_found(fake_mysql):
    fake_mysql.queue(0)

    with pytest.raises(NotFoundError):
        MySQLAttendanceLedger(fake_mysql).delete_by_id("nope")
