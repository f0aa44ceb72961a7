from __future__ import annotations

import uuid
from datetime import datetime
from typing import Callable, Iterable, Optional

from ..core.constants import WARNING_THRESHOLD_DAYS
from ..core.exceptions import ClearanceExpiredError, DuplicateCheckInError, ValidationError
from ..residents.model import Resident
from ..residents.status import classify
from ..trainers.model import Trainer
from .factory import AdmissionStrategyFactory
from .model import AdmissionResult, CheckInRecord


def _new_record_id() -> str:
    return uuid.uuid4().hex


class AdmissionController:
    """Decide whether a resident may check in, and build the record if so.

    Rules run in a fixed order: required selections and an active trainer,
    then clearance (expired refuses, expiring admits with an advisory), then
    one visit per resident per local calendar day. Nothing is persisted here;
    the caller hands the record to the ledger.
    """

    def __init__(
        self,
        *,
        strategy_factory: AdmissionStrategyFactory | None = None,
        warning_days: int = WARNING_THRESHOLD_DAYS,
        id_factory: Callable[[], str] = _new_record_id,
    ):
        self._factory = strategy_factory or AdmissionStrategyFactory()
        self._warning_days = int(warning_days)
        self._id_factory = id_factory

    def attempt_check_in(
        self,
        resident: Optional[Resident],
        trainer: Optional[Trainer],
        existing_todays_records: Iterable[CheckInRecord],
        now: datetime,
    ) -> AdmissionResult:
        if resident is None or trainer is None:
            raise ValidationError("Both a resident and a trainer must be selected")
        if not trainer.active:
            raise ValidationError(f"Trainer {trainer.name} is not active")

        today = now.date()
        clearance = classify(resident.subscription_expiry, today, warning_days=self._warning_days)
        strategy = self._factory.for_status(clearance.status)
        decision = strategy.decide(resident_name=resident.full_name, clearance=clearance)
        if not decision.allowed:
            raise ClearanceExpiredError(decision.reason or "Medical clearance expired")

        for existing in existing_todays_records:
            if existing.resident_id == resident.resident_id and existing.visit_date == today:
                raise DuplicateCheckInError(f"{resident.full_name} has already checked in today")

        record = CheckInRecord(
            record_id=self._id_factory(),
            resident_id=resident.resident_id,
            resident_name=resident.full_name,
            trainer_id=trainer.trainer_id,
            trainer_name=trainer.name,
            timestamp=now,
        )
        return AdmissionResult(record=record, advisory=decision.advisory)
