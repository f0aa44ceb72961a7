from __future__ import annotations

import logging
import uuid
from datetime import date
from typing import Optional

from ..common.datetime_utils import DateLike
from ..common.validators import optional_text, require_date, require_non_empty
from ..core.constants import WARNING_THRESHOLD_DAYS
from ..core.enums import SubscriptionStatus, TrainingLimitation
from ..core.exceptions import NotFoundError
from .model import Resident, ResidentStatusView
from .repository import ResidentRepository
from .status import classify

logger = logging.getLogger(__name__)

_STATUS_PRIORITY = {
    SubscriptionStatus.EXPIRED: 0,
    SubscriptionStatus.WARNING: 1,
    SubscriptionStatus.VALID: 2,
}

_LIMITATION_LABELS = {
    TrainingLimitation.NONE: "No limitation",
    TrainingLimitation.SEATED_ONLY: "Seated training only",
    TrainingLimitation.PHYSIO_SUPERVISION: "Physiotherapist supervision required",
    TrainingLimitation.OTHER: "Other",
}


def limitation_label(limitation: TrainingLimitation, details: Optional[str] = None) -> str:
    if limitation == TrainingLimitation.OTHER and details and details.strip():
        return details.strip()
    return _LIMITATION_LABELS[limitation]


class ResidentService:
    """Use case: manage the resident roster (admin)."""

    def __init__(self, residents: ResidentRepository, *, warning_days: int = WARNING_THRESHOLD_DAYS):
        self._residents = residents
        self._warning_days = int(warning_days)

    def get(self, resident_id: str) -> Resident:
        resident = self._residents.get_by_id(resident_id)
        if not resident:
            raise NotFoundError(f"Resident {resident_id} not found")
        return resident

    def create_resident(
        self,
        *,
        first_name: str,
        last_name: str,
        medical_certificate_start_date: DateLike,
        training_limitation: TrainingLimitation | str | None = None,
        medical_conditions: Optional[str] = None,
    ) -> Resident:
        resident = Resident(
            resident_id=uuid.uuid4().hex,
            first_name=require_non_empty(first_name, "First name"),
            last_name=require_non_empty(last_name, "Last name"),
            medical_certificate_start_date=require_date(medical_certificate_start_date, "Certificate start date"),
            training_limitation=TrainingLimitation.parse(training_limitation),
            medical_conditions=optional_text(medical_conditions, "Medical conditions"),
        )
        created = self._residents.insert(resident)
        logger.info("Created resident %s (%s)", created.resident_id, created.full_name)
        return created

    def update_resident(
        self,
        resident_id: str,
        *,
        first_name: Optional[str] = None,
        last_name: Optional[str] = None,
        medical_certificate_start_date: DateLike = None,
        training_limitation: TrainingLimitation | str | None = None,
        medical_conditions: Optional[str] = None,
    ) -> Resident:
        """Apply a partial update. Fields left as None keep their value."""

        current = self.get(resident_id)
        updated = Resident(
            resident_id=current.resident_id,
            first_name=require_non_empty(first_name, "First name") if first_name is not None else current.first_name,
            last_name=require_non_empty(last_name, "Last name") if last_name is not None else current.last_name,
            medical_certificate_start_date=(
                require_date(medical_certificate_start_date, "Certificate start date")
                if medical_certificate_start_date is not None
                else current.medical_certificate_start_date
            ),
            training_limitation=(
                TrainingLimitation.parse(training_limitation)
                if training_limitation is not None
                else current.training_limitation
            ),
            medical_conditions=(
                optional_text(medical_conditions, "Medical conditions")
                if medical_conditions is not None
                else current.medical_conditions
            ),
        )
        if not self._residents.update(updated):
            raise NotFoundError(f"Resident {resident_id} not found")
        logger.info("Updated resident %s", resident_id)
        return updated

    def delete_resident(self, resident_id: str) -> None:
        # Check-in history keeps the copied name; nothing else to clean up.
        if not self._residents.delete(resident_id):
            raise NotFoundError(f"Resident {resident_id} not found")
        logger.info("Deleted resident %s", resident_id)

    def status_of(self, resident: Resident, today: date) -> ResidentStatusView:
        info = classify(resident.subscription_expiry, today, warning_days=self._warning_days)
        return ResidentStatusView(resident=resident, status=info.status, days_remaining=info.days_remaining)

    def list_with_status(self, today: date) -> list[ResidentStatusView]:
        """Roster ordered for the front desk: expired first, then warnings, then by name."""

        views = [self.status_of(r, today) for r in self._residents.list()]
        views.sort(key=lambda v: (_STATUS_PRIORITY[v.status], v.full_name.casefold(), v.resident.resident_id))
        return views

    def search(self, term: str, today: date) -> list[ResidentStatusView]:
        views = self.list_with_status(today)
        term = (term or "").strip().casefold()
        if not term:
            return views
        return [v for v in views if term in v.full_name.casefold() or term in v.resident.resident_id.casefold()]

    @staticmethod
    def new_resident_defaults(today: date) -> dict:
        return {
            "first_name": "",
            "last_name": "",
            "medical_certificate_start_date": today,
            "training_limitation": TrainingLimitation.NONE,
            "medical_conditions": "",
        }
