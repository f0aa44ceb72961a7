from __future__ import annotations

from datetime import date, datetime

import pytest

from src.gym_attendance.gym_attendance.attendance.admission import AdmissionController
from src.gym_attendance.gym_attendance.attendance.model import CheckInRecord
from src.gym_attendance.gym_attendance.core.exceptions import (
    ClearanceExpiredError,
    DuplicateCheckInError,
    ValidationError,
)
from src.gym_attendance.gym_attendance.residents.model import Resident
from src.gym_attendance.gym_attendance.trainers.model import Trainer

NOW = datetime(2025, 1, 1, 9, 30)
VALID = Resident("r1", "Arie", "Elzas", date(2024, 6, 1))
EXPIRING = Resident("r2", "Yosef", "On", date(2024, 1, 10))
EXPIRED = Resident("r3", "Rivka", "Bensadon", date(2023, 1, 10))
TRAINER = Trainer("t1", "Ran Meged")


def _record(resident: Resident, moment: datetime, record_id: str = "c1") -> CheckInRecord:
    return CheckInRecord(
        record_id=record_id,
        resident_id=resident.resident_id,
        resident_name=resident.full_name,
        trainer_id=TRAINER.trainer_id,
        trainer_name=TRAINER.name,
        timestamp=moment,
    )


def test_admits_valid_resident_and_copies_names():
    controller = AdmissionController(id_factory=lambda: "new-id")

    result = controller.attempt_check_in(VALID, TRAINER, [], NOW)

    assert result.advisory is None
    assert result.record == CheckInRecord(
        record_id="new-id",
        resident_id="r1",
        resident_name="Arie Elzas",
        trainer_id="t1",
        trainer_name="Ran Meged",
        timestamp=NOW,
    )


def test_expiring_resident_is_admitted_with_advisory():
    result = AdmissionController().attempt_check_in(EXPIRING, TRAINER, [], NOW)

    assert result.has_advisory
    assert "9 days" in result.advisory


def test_expired_resident_is_refused():
    with pytest.raises(ClearanceExpiredError):
        AdmissionController().attempt_check_in(EXPIRED, TRAINER, [], NOW)


@pytest.mark.parametrize(
    "resident, trainer",
    [
        (None, TRAINER),
        (VALID, None),
        (VALID, Trainer("t9", "Retired Coach", active=False)),
    ],
)
def test_missing_selection_or_inactive_trainer_is_invalid(resident, trainer):
    with pytest.raises(ValidationError):
        AdmissionController().attempt_check_in(resident, trainer, [], NOW)


def test_second_check_in_same_calendar_day_is_refused():
    earlier = _record(VALID, datetime(2025, 1, 1, 0, 5))

    with pytest.raises(DuplicateCheckInError):
        AdmissionController().attempt_check_in(VALID, TRAINER, [earlier], datetime(2025, 1, 1, 23, 55))


def test_visit_less_than_24h_ago_but_yesterday_is_not_duplicate():
    yesterday_late = _record(VALID, datetime(2024, 12, 31, 23, 50))

    result = AdmissionController().attempt_check_in(VALID, TRAINER, [yesterday_late], datetime(2025, 1, 1, 0, 10))

    assert result.record.resident_id == "r1"


def test_other_residents_records_do_not_block():
    others = [_record(EXPIRING, NOW, "c1")]

    result = AdmissionController().attempt_check_in(VALID, TRAINER, others, NOW)

    assert result.record.resident_id == "r1"


def test_expired_check_runs_before_duplicate_check():
    already = _record(EXPIRED, NOW)

    with pytest.raises(ClearanceExpiredError):
        AdmissionController().attempt_check_in(EXPIRED, TRAINER, [already], NOW)


def test_fresh_id_per_admission():
    controller = AdmissionController()

    first = controller.attempt_check_in(VALID, TRAINER, [], NOW)
    second = controller.attempt_check_in(EXPIRING, TRAINER, [], NOW)

    assert first.record.record_id != second.record.record_id
