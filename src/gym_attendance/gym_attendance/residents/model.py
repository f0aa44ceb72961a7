from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import date
from typing import Optional

from ..common.datetime_utils import add_years
from ..core.constants import CERTIFICATE_VALIDITY_YEARS
from ..core.enums import SubscriptionStatus, TrainingLimitation


@dataclass(frozen=True)
class Resident:
    """Domain entity: a facility resident with a medical certificate.

    The subscription expiry is not stored on the entity; it is always derived
    from the certificate start date so the two can never disagree.
    """

    resident_id: str
    first_name: str
    last_name: str
    medical_certificate_start_date: date
    training_limitation: TrainingLimitation = TrainingLimitation.NONE
    medical_conditions: Optional[str] = None

    @property
    def full_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip()

    @property
    def subscription_expiry(self) -> date:
        return add_years(self.medical_certificate_start_date, CERTIFICATE_VALIDITY_YEARS)

    def with_certificate_date(self, start_date: date) -> "Resident":
        return replace(self, medical_certificate_start_date=start_date)


@dataclass(frozen=True)
class ClearanceInfo:
    status: SubscriptionStatus
    days_remaining: Optional[int]


@dataclass(frozen=True)
class ResidentStatusView:
    """Read-model for roster screens: resident plus clearance computed for a given day."""

    resident: Resident
    status: SubscriptionStatus
    days_remaining: Optional[int]

    @property
    def full_name(self) -> str:
        return self.resident.full_name
