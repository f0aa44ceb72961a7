from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Optional

from ...residents.model import ClearanceInfo


@dataclass(frozen=True)
class AdmissionDecision:
    allowed: bool
    advisory: Optional[str] = None
    reason: Optional[str] = None


class AdmissionStrategy(ABC):
    """Strategy Pattern: how a clearance status affects a check-in."""

    @abstractmethod
    def decide(self, *, resident_name: str, clearance: ClearanceInfo) -> AdmissionDecision:
        raise NotImplementedError
