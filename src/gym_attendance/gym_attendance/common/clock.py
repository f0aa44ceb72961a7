from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Protocol


class Clock(Protocol):
    def now(self) -> datetime:
        raise NotImplementedError


class SystemClock:
    """Current local time (naive, like the timestamps we store)."""

    def now(self) -> datetime:
        return datetime.now()


@dataclass
class FixedClock:
    """Clock pinned to a given instant; used by tests and scripted runs."""

    current: datetime

    def now(self) -> datetime:
        return self.current

    def today(self) -> date:
        return self.current.date()

    def advance_to(self, moment: datetime) -> None:
        self.current = moment
