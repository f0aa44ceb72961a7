from __future__ import annotations

from dataclasses import dataclass

from ..core.enums import SubscriptionStatus
from .strategies.base import AdmissionStrategy
from .strategies.expired_strategy import ExpiredClearanceStrategy
from .strategies.valid_strategy import ValidClearanceStrategy
from .strategies.warning_strategy import ExpiringClearanceStrategy


@dataclass
class AdmissionStrategyFactory:
    """Factory Pattern: choose the admission strategy for a clearance status."""

    def for_status(self, status: SubscriptionStatus) -> AdmissionStrategy:
        if status == SubscriptionStatus.VALID:
            return ValidClearanceStrategy()
        if status == SubscriptionStatus.WARNING:
            return ExpiringClearanceStrategy()
        return ExpiredClearanceStrategy()
