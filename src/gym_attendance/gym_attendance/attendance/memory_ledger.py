from __future__ import annotations

from datetime import date
from typing import Callable, Iterable, Sequence

from ..common.datetime_utils import end_of_day, start_of_day
from ..core.exceptions import DuplicateCheckInError, NotFoundError, StoreError
from .model import CheckInRecord, ReportFilter
from .repository import AttendanceLedger


def matches(record: CheckInRecord, criteria: ReportFilter) -> bool:
    """Shared filter semantics: inclusive whole-day range, exact trainer, name substring."""

    if criteria.start_date is not None and record.timestamp < start_of_day(criteria.start_date):
        return False
    if criteria.end_date is not None and record.timestamp > end_of_day(criteria.end_date):
        return False
    if criteria.trainer_id and record.trainer_id != criteria.trainer_id:
        return False
    if criteria.resident_name_contains:
        needle = criteria.resident_name_contains.strip().casefold()
        if needle and needle not in record.resident_name.casefold():
            return False
    return True


class InMemoryAttendanceLedger(AttendanceLedger):
    def __init__(self, records: Iterable[CheckInRecord] = ()):
        self._by_id: dict[str, CheckInRecord] = {}
        for record in records:
            self.insert(record)

    def insert(self, record: CheckInRecord) -> CheckInRecord:
        if record.record_id in self._by_id:
            raise StoreError(f"Check-in record {record.record_id} already exists")
        # Same uniqueness rule the MySQL table enforces with its composite key.
        for existing in self._by_id.values():
            if existing.resident_id == record.resident_id and existing.visit_date == record.visit_date:
                raise DuplicateCheckInError(f"{record.resident_name} has already checked in on {record.visit_date}")
        self._by_id[record.record_id] = record
        return record

    def get_all(self) -> Sequence[CheckInRecord]:
        return list(self._by_id.values())

    def get_for_date(self, day: date) -> Sequence[CheckInRecord]:
        return [r for r in self._by_id.values() if r.visit_date == day]

    def delete_by_id(self, record_id: str) -> None:
        if self._by_id.pop(record_id, None) is None:
            raise NotFoundError(f"Check-in record {record_id} not found")

    def delete_where(self, predicate: Callable[[CheckInRecord], bool]) -> int:
        doomed = [rid for rid, r in self._by_id.items() if predicate(r)]
        for rid in doomed:
            del self._by_id[rid]
        return len(doomed)

    def filter(self, criteria: ReportFilter) -> Sequence[CheckInRecord]:
        return [r for r in self._by_id.values() if matches(r, criteria)]
