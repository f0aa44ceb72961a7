from __future__ import annotations

import logging
from typing import Optional

from ..common.clock import Clock, SystemClock
from ..core.exceptions import AdmissionError, ValidationError
from ..residents.repository import ResidentRepository
from ..trainers.repository import TrainerRepository
from .admission import AdmissionController
from .model import AdmissionResult, CheckInRecord
from .repository import AttendanceLedger

logger = logging.getLogger(__name__)


class CheckInService:
    """Use case: front-desk check-in and today's log."""

    def __init__(
        self,
        ledger: AttendanceLedger,
        residents: ResidentRepository,
        trainers: TrainerRepository,
        *,
        controller: AdmissionController | None = None,
        clock: Clock | None = None,
    ):
        self._ledger = ledger
        self._residents = residents
        self._trainers = trainers
        self._controller = controller or AdmissionController()
        self._clock = clock or SystemClock()

    def check_in(self, resident_id: Optional[str], trainer_id: Optional[str]) -> AdmissionResult:
        if not isinstance(resident_id, str) or not isinstance(trainer_id, str):
            raise ValidationError("Resident and trainer ids must be text")
        if not resident_id or not trainer_id:
            raise ValidationError("Both a resident and a trainer must be selected")

        resident = self._residents.get_by_id(resident_id)
        if not resident:
            raise ValidationError("Selected resident does not exist")
        trainer = self._trainers.get_by_id(trainer_id)
        if not trainer:
            raise ValidationError("Selected trainer does not exist")

        now = self._clock.now()
        snapshot = self._ledger.get_for_date(now.date())

        try:
            result = self._controller.attempt_check_in(resident, trainer, snapshot, now)
        except AdmissionError as exc:
            logger.warning("Check-in refused for resident %s: %s", resident_id, exc)
            raise

        # The ledger re-checks uniqueness; a concurrent desk may have won the race.
        self._ledger.insert(result.record)
        logger.info(
            "Checked in resident %s with trainer %s (record %s)",
            resident_id,
            trainer_id,
            result.record.record_id,
        )
        return result

    def todays_check_ins(self) -> list[CheckInRecord]:
        """Today's visits, most recent first."""
        today = self._clock.now().date()
        records = list(self._ledger.get_for_date(today))
        records.sort(key=lambda r: (r.timestamp, r.record_id), reverse=True)
        return records

    def delete_record(self, record_id: str) -> None:
        self._ledger.delete_by_id(record_id)
        logger.info("Deleted check-in record %s", record_id)

    def purge_today(self) -> int:
        """Remove every check-in of the current calendar day. Returns the number removed."""
        today = self._clock.now().date()
        removed = self._ledger.delete_where(lambda r: r.visit_date == today)
        logger.info("Purged %s check-in record(s) for %s", removed, today.isoformat())
        return removed
