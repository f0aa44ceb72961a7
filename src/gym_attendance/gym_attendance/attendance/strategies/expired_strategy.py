from __future__ import annotations

from ...residents.model import ClearanceInfo
from .base import AdmissionDecision, AdmissionStrategy


class ExpiredClearanceStrategy(AdmissionStrategy):
    """Clearance expired or unknown: refuse."""

    def decide(self, *, resident_name: str, clearance: ClearanceInfo) -> AdmissionDecision:
        if clearance.days_remaining is None:
            reason = f"No valid medical certificate on file for {resident_name}"
        else:
            reason = f"Medical certificate of {resident_name} expired {-clearance.days_remaining} day(s) ago"
        return AdmissionDecision(allowed=False, reason=reason)
