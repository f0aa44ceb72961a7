from __future__ import annotations

from ...residents.model import ClearanceInfo
from .base import AdmissionDecision, AdmissionStrategy


class ExpiringClearanceStrategy(AdmissionStrategy):
    """Clearance about to expire: admit, with a renewal reminder."""

    def decide(self, *, resident_name: str, clearance: ClearanceInfo) -> AdmissionDecision:
        days = clearance.days_remaining
        if days == 0:
            when = "expires today"
        elif days == 1:
            when = "expires tomorrow"
        else:
            when = f"expires in {days} days"
        return AdmissionDecision(
            allowed=True,
            advisory=f"Medical certificate of {resident_name} {when}; please remind them to renew it.",
        )
