from __future__ import annotations

from enum import Enum
from typing import Optional

from .exceptions import ValidationError


class SubscriptionStatus(str, Enum):
    """Medical clearance state, derived on read and never stored."""

    VALID = "VALID"
    WARNING = "WARNING"
    EXPIRED = "EXPIRED"


class TrainingLimitation(str, Enum):
    """Restriction recorded on the resident's medical certificate."""

    NONE = "NONE"
    SEATED_ONLY = "SEATED_ONLY"
    PHYSIO_SUPERVISION = "PHYSIO_SUPERVISION"
    OTHER = "OTHER"

    @classmethod
    def parse(cls, value: Optional[str]) -> "TrainingLimitation":
        """Parse stored or submitted values, including legacy spellings.

        Unknown values raise instead of falling back to NONE: a typo must not
        silently clear a restriction.
        """

        if value is None:
            return cls.NONE
        if isinstance(value, cls):
            return value

        key = str(value).strip().upper().replace("-", "_")
        if not key:
            return cls.NONE
        if key in cls.__members__:
            return cls[key]
        if key in LEGACY_LIMITATIONS:
            return LEGACY_LIMITATIONS[key]
        raise ValidationError(f"Unknown training limitation: {value!r}")


# Values written by earlier versions of the roster.
LEGACY_LIMITATIONS: dict[str, TrainingLimitation] = {
    "SITTING_ONLY": TrainingLimitation.SEATED_ONLY,
    "PHYSIO_REQUIRED": TrainingLimitation.PHYSIO_SUPERVISION,
    "PARTIAL": TrainingLimitation.OTHER,
    "FULL": TrainingLimitation.OTHER,
}


class ReportViewMode(str, Enum):
    DETAILED = "detailed"
    AGGREGATED = "aggregated"
