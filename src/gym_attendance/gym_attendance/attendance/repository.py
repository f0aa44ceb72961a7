from __future__ import annotations

from datetime import date
from typing import Callable, Protocol, Sequence

from .model import CheckInRecord, ReportFilter


class AttendanceLedger(Protocol):
    """Check-in history store.

    Implementations must reject a second record for the same resident on the
    same calendar day (DuplicateCheckInError) and must never leave a partial
    record behind when an insert fails. Result order is not guaranteed.
    """

    def insert(self, record: CheckInRecord) -> CheckInRecord:
        raise NotImplementedError

    def get_all(self) -> Sequence[CheckInRecord]:
        raise NotImplementedError

    def get_for_date(self, day: date) -> Sequence[CheckInRecord]:
        raise NotImplementedError

    def delete_by_id(self, record_id: str) -> None:
        raise NotImplementedError

    def delete_where(self, predicate: Callable[[CheckInRecord], bool]) -> int:
        raise NotImplementedError

    def filter(self, criteria: ReportFilter) -> Sequence[CheckInRecord]:
        raise NotImplementedError
