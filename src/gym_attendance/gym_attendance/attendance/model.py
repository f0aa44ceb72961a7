from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional


@dataclass(frozen=True)
class CheckInRecord:
    """Domain entity: one gym visit.

    Resident and trainer names are copied at check-in time so the history
    survives later renames and deletions.
    """

    record_id: str
    resident_id: str
    resident_name: str
    trainer_id: str
    trainer_name: str
    timestamp: datetime

    @property
    def visit_date(self) -> date:
        return self.timestamp.date()


@dataclass(frozen=True)
class AdmissionResult:
    record: CheckInRecord
    advisory: Optional[str] = None

    @property
    def has_advisory(self) -> bool:
        return self.advisory is not None


@dataclass(frozen=True)
class ReportFilter:
    """Ledger query. Omitted fields do not restrict the result."""

    start_date: Optional[date] = None
    end_date: Optional[date] = None
    trainer_id: Optional[str] = None
    resident_name_contains: Optional[str] = None
