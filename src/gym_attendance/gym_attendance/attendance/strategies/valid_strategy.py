from __future__ import annotations

from ...residents.model import ClearanceInfo
from .base import AdmissionDecision, AdmissionStrategy


class ValidClearanceStrategy(AdmissionStrategy):
    """Clearance valid: admit without remarks."""

    def decide(self, *, resident_name: str, clearance: ClearanceInfo) -> AdmissionDecision:
        return AdmissionDecision(allowed=True)
