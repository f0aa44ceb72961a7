from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Sequence

from ..core.enums import ReportViewMode


@dataclass(frozen=True)
class DetailedRow:
    """Read-model for the detailed log and its export."""

    record_id: str
    date: str
    time: str
    resident_id: str
    resident_name: str
    trainer_id: str
    trainer_name: str
    timestamp: datetime


@dataclass(frozen=True)
class ResidentSummary:
    resident_id: str
    name: str
    count: int
    last_visit: datetime


@dataclass(frozen=True)
class ChartPoint:
    name: str
    value: int


@dataclass(frozen=True)
class ExportTable:
    """Rows for an external writer. ``header`` is always the first row written."""

    header: Sequence[str]
    rows: Sequence[Sequence[object]]
    filename: str


@dataclass(frozen=True)
class ReportData:
    mode: ReportViewMode
    rows: list[DetailedRow]
    summary: list[ResidentSummary]
    chart: list[ChartPoint]
