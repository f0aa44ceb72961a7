from __future__ import annotations

import calendar
from datetime import date, datetime, time
from typing import Optional, Union

DateLike = Union[date, datetime, str, None]


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD (or a full ISO date-time) string into date."""
    value = value.strip()
    if len(value) == 10:
        return datetime.strptime(value, "%Y-%m-%d").date()
    return parse_iso_datetime(value).date()


def parse_iso_datetime(value: str) -> datetime:
    """Parse an ISO-8601 date-time into a naive local datetime.

    Aware values (``Z`` or an offset) are converted to local time first.
    """
    value = value.strip()
    if value.endswith("Z"):
        value = value[:-1] + "+00:00"
    parsed = datetime.fromisoformat(value)
    if parsed.tzinfo is not None:
        parsed = parsed.astimezone().replace(tzinfo=None)
    return parsed


def coerce_date(value: DateLike) -> Optional[date]:
    """Return a date for date/datetime/ISO string input, None if missing or unparseable."""
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        if not value.strip():
            return None
        try:
            return parse_iso_date(value)
        except ValueError:
            return None
    return None


def add_years(day: date, years: int) -> date:
    """Same calendar day ``years`` later; 29 Feb falls back to 28 Feb."""
    target_year = day.year + years
    last_day = calendar.monthrange(target_year, day.month)[1]
    return day.replace(year=target_year, day=min(day.day, last_day))


def start_of_day(day: date) -> datetime:
    return datetime.combine(day, time.min)


def end_of_day(day: date) -> datetime:
    return datetime.combine(day, time.max)


def month_range(today: date) -> tuple[date, date]:
    """First and last day of the month containing ``today``."""
    last_day = calendar.monthrange(today.year, today.month)[1]
    return today.replace(day=1), today.replace(day=last_day)
