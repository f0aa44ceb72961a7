from __future__ import annotations

from typing import Optional

from ..attendance.model import CheckInRecord, ReportFilter
from ..attendance.repository import AttendanceLedger
from ..core.constants import (
    DETAILED_EXPORT_FILENAME,
    DISPLAY_DATE_FORMAT,
    DISPLAY_DATETIME_FORMAT,
    DISPLAY_TIME_FORMAT,
    SUMMARY_EXPORT_FILENAME,
    TOP_CHART_LIMIT,
)
from ..core.enums import ReportViewMode
from .model import ChartPoint, DetailedRow, ExportTable, ReportData, ResidentSummary

DETAILED_HEADER = ("Date", "Time", "Resident", "Trainer")
SUMMARY_HEADER = ("Resident", "Visits in period", "Last visit")


def _to_row(r: CheckInRecord) -> DetailedRow:
    return DetailedRow(
        record_id=r.record_id,
        date=r.timestamp.strftime(DISPLAY_DATE_FORMAT),
        time=r.timestamp.strftime(DISPLAY_TIME_FORMAT),
        resident_id=r.resident_id,
        resident_name=r.resident_name,
        trainer_id=r.trainer_id,
        trainer_name=r.trainer_name,
        timestamp=r.timestamp,
    )


def aggregate_by_resident(records: list[CheckInRecord]) -> list[ResidentSummary]:
    """Group visits per resident.

    Ordered by visit count (desc), then name, then resident id, so ties come
    out the same way every time. The name shown is the one on the most
    recent visit.
    """

    stats: dict[str, dict] = {}
    for r in records:
        s = stats.get(r.resident_id)
        if not s:
            s = {"name": r.resident_name, "count": 0, "last_visit": r.timestamp}
            stats[r.resident_id] = s
        s["count"] += 1
        if r.timestamp > s["last_visit"]:
            s["last_visit"] = r.timestamp
            s["name"] = r.resident_name

    summary = [
        ResidentSummary(resident_id=rid, name=s["name"], count=s["count"], last_visit=s["last_visit"])
        for rid, s in stats.items()
    ]
    summary.sort(key=lambda x: (-x.count, x.name.casefold(), x.resident_id))
    return summary


def visits_by_trainer(records: list[CheckInRecord]) -> list[ChartPoint]:
    groups: dict[str, int] = {}
    for r in records:
        groups[r.trainer_name] = groups.get(r.trainer_name, 0) + 1
    points = [ChartPoint(name=name, value=count) for name, count in groups.items()]
    points.sort(key=lambda p: (-p.value, p.name.casefold()))
    return points


class ReportService:
    """Attendance reports over the check-in ledger (read only)."""

    def __init__(self, ledger: AttendanceLedger, *, top_limit: int = TOP_CHART_LIMIT):
        self._ledger = ledger
        self._top_limit = int(top_limit)

    def _records(self, criteria: Optional[ReportFilter]) -> list[CheckInRecord]:
        return list(self._ledger.filter(criteria or ReportFilter()))

    def detailed(self, criteria: Optional[ReportFilter] = None) -> list[DetailedRow]:
        records = self._records(criteria)
        records.sort(key=lambda r: (r.timestamp, r.record_id), reverse=True)
        return [_to_row(r) for r in records]

    def aggregated(self, criteria: Optional[ReportFilter] = None) -> list[ResidentSummary]:
        return aggregate_by_resident(self._records(criteria))

    def chart(self, criteria: Optional[ReportFilter] = None, mode: ReportViewMode = ReportViewMode.DETAILED) -> list[ChartPoint]:
        records = self._records(criteria)
        if ReportViewMode(mode) == ReportViewMode.DETAILED:
            return visits_by_trainer(records)
        top = aggregate_by_resident(records)[: self._top_limit]
        return [ChartPoint(name=s.name, value=s.count) for s in top]

    def build_report(self, criteria: Optional[ReportFilter] = None, mode: ReportViewMode = ReportViewMode.DETAILED) -> ReportData:
        """Everything one report screen needs, from a single ledger read."""

        mode = ReportViewMode(mode)
        records = self._records(criteria)
        summary = aggregate_by_resident(records)
        if mode == ReportViewMode.DETAILED:
            chart = visits_by_trainer(records)
        else:
            chart = [ChartPoint(name=s.name, value=s.count) for s in summary[: self._top_limit]]

        records.sort(key=lambda r: (r.timestamp, r.record_id), reverse=True)
        return ReportData(mode=mode, rows=[_to_row(r) for r in records], summary=summary, chart=chart)

    def export(self, criteria: Optional[ReportFilter] = None, mode: ReportViewMode = ReportViewMode.DETAILED) -> ExportTable:
        if ReportViewMode(mode) == ReportViewMode.DETAILED:
            return ExportTable(
                header=DETAILED_HEADER,
                rows=[[row.date, row.time, row.resident_name, row.trainer_name] for row in self.detailed(criteria)],
                filename=DETAILED_EXPORT_FILENAME,
            )
        return ExportTable(
            header=SUMMARY_HEADER,
            rows=[
                [s.name, s.count, s.last_visit.strftime(DISPLAY_DATETIME_FORMAT)]
                for s in self.aggregated(criteria)
            ],
            filename=SUMMARY_EXPORT_FILENAME,
        )
