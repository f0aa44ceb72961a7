from __future__ import annotations

from datetime import date

import pytest

from src.gym_attendance.gym_attendance.core.enums import SubscriptionStatus, TrainingLimitation
from src.gym_attendance.gym_attendance.core.exceptions import NotFoundError, ValidationError
from src.gym_attendance.gym_attendance.residents.memory_resident_repository import InMemoryResidentRepository
from src.gym_attendance.gym_attendance.residents.service import ResidentService, limitation_label

TODAY = date(2025, 1, 1)


def test_create_resident_derives_expiry():
    svc = ResidentService(InMemoryResidentRepository())

    resident = svc.create_resident(
        first_name=" Dalia ",
        last_name="Zucker",
        medical_certificate_start_date="2024-04-29",
        training_limitation="SEATED_ONLY",
    )

    assert resident.first_name == "Dalia"
    assert resident.subscription_expiry == date(2025, 4, 29)
    assert resident.training_limitation == TrainingLimitation.SEATED_ONLY
    assert svc.get(resident.resident_id) == resident


def test_create_resident_requires_names_and_date():
    svc = ResidentService(InMemoryResidentRepository())

    with pytest.raises(ValidationError):
        svc.create_resident(first_name="", last_name="X", medical_certificate_start_date="2024-01-01")
    with pytest.raises(ValidationError):
        svc.create_resident(first_name="A", last_name="X", medical_certificate_start_date="yesterday")


def test_update_start_date_recomputes_expiry(residents):
    svc = ResidentService(InMemoryResidentRepository(residents))

    updated = svc.update_resident("r3", medical_certificate_start_date=date(2024, 12, 1))

    assert updated.subscription_expiry == date(2025, 12, 1)
    assert updated.first_name == "Rivka"
    assert svc.status_of(updated, TODAY).status == SubscriptionStatus.VALID


def test_update_and_delete_missing_resident_raise_not_found():
    svc = ResidentService(InMemoryResidentRepository())

    with pytest.raises(NotFoundError):
        svc.update_resident("nope", first_name="A")
    with pytest.raises(NotFoundError):
        svc.delete_resident("nope")


def test_list_with_status_puts_expired_first(residents):
    svc = ResidentService(InMemoryResidentRepository(residents))

    views = svc.list_with_status(TODAY)

    assert [v.resident.resident_id for v in views] == ["r3", "r2", "r1"]
    assert [v.status for v in views] == [
        SubscriptionStatus.EXPIRED,
        SubscriptionStatus.WARNING,
        SubscriptionStatus.VALID,
    ]
    assert views[1].days_remaining == 9


def test_search_matches_name_or_id_case_insensitive(residents):
    svc = ResidentService(InMemoryResidentRepository(residents))

    assert [v.resident.resident_id for v in svc.search("elz", TODAY)] == ["r1"]
    assert [v.resident.resident_id for v in svc.search("R2", TODAY)] == ["r2"]
    assert len(svc.search("", TODAY)) == 3


def test_delete_resident_removes_from_roster(residents):
    repo = InMemoryResidentRepository(residents)
    svc = ResidentService(repo)

    svc.delete_resident("r1")

    assert repo.get_by_id("r1") is None


@pytest.mark.parametrize(
    "raw, expected",
    [
        (None, TrainingLimitation.NONE),
        ("", TrainingLimitation.NONE),
        ("seated-only", TrainingLimitation.SEATED_ONLY),
        ("SITTING_ONLY", TrainingLimitation.SEATED_ONLY),
        ("PHYSIO_REQUIRED", TrainingLimitation.PHYSIO_SUPERVISION),
        ("PARTIAL", TrainingLimitation.OTHER),
        ("FULL", TrainingLimitation.OTHER),
    ],
)
def test_training_limitation_parses_legacy_values(raw, expected):
    assert TrainingLimitation.parse(raw) == expected


def test_unknown_training_limitation_is_rejected():
    with pytest.raises(ValidationError):
        TrainingLimitation.parse("SOMETIMES")


def test_limitation_label_uses_free_text_for_other():
    assert limitation_label(TrainingLimitation.OTHER, "Knee replacement") == "Knee replacement"
    assert limitation_label(TrainingLimitation.OTHER, None) == "Other"
    assert limitation_label(TrainingLimitation.SEATED_ONLY) == "Seated training only"


def test_new_resident_form_defaults_to_today():
    defaults = ResidentService.new_resident_defaults(TODAY)

    assert defaults["medical_certificate_start_date"] == TODAY
    assert defaults["training_limitation"] == TrainingLimitation.NONE
