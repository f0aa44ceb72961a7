from __future__ import annotations

from datetime import date, datetime

import pytest

from src.gym_attendance.gym_attendance.common.clock import FixedClock
from src.gym_attendance.gym_attendance.container import build_memory_container
from src.gym_attendance.gym_attendance.residents.model import Resident
from src.gym_attendance.gym_attendance.trainers.model import Trainer


@pytest.fixture
def fixed_now() -> datetime:
    return datetime(2025, 1, 1, 9, 30, 0)


@pytest.fixture
def clock(fixed_now) -> FixedClock:
    return FixedClock(fixed_now)


@pytest.fixture
def residents() -> list[Resident]:
    return [
        # expiry 2025-06-01: VALID on 2025-01-01
        Resident("r1", "Arie", "Elzas", date(2024, 6, 1)),
        # expiry 2025-01-10: WARNING, 9 days left
        Resident("r2", "Yosef", "On", date(2024, 1, 10)),
        # expiry 2024-01-10: EXPIRED
        Resident("r3", "Rivka", "Bensadon", date(2023, 1, 10)),
    ]


@pytest.fixture
def trainers() -> list[Trainer]:
    return [
        Trainer("t1", "Ran Meged"),
        Trainer("t2", "Nina Tauber"),
        Trainer("t9", "Retired Coach", active=False),
    ]


@pytest.fixture
def container(residents, trainers, clock):
    return build_memory_container(residents=residents, trainers=trainers, clock=clock)


class FakeMySQL:
    """Connection factory standing in for DatabaseConnection.

    Each ``execute`` consumes the next queued outcome: a list of row dicts,
    an int rowcount, or an exception to raise. Unqueued statements return
    no rows.
    """

    def __init__(self):
        self.executed: list[tuple[str, tuple]] = []
        self.outcomes: list = []
        self.commits = 0
        self.rollbacks = 0
        self.rowcount = -1
        self._rows: list[dict] = []

    def queue(self, *outcomes) -> "FakeMySQL":
        self.outcomes.extend(outcomes)
        return self

    def statements(self) -> list[str]:
        return [sql for sql, _ in self.executed]

    # connection
    def connect(self):
        return self

    def cursor(self, dictionary=True):
        return self

    def commit(self):
        self.commits += 1

    def rollback(self):
        self.rollbacks += 1

    def close(self):
        pass

    # cursor
    def execute(self, sql, params=()):
        self.executed.append((" ".join(sql.split()), tuple(params)))
        outcome = self.outcomes.pop(0) if self.outcomes else []
        if isinstance(outcome, BaseException):
            raise outcome
        if isinstance(outcome, int):
            self._rows, self.rowcount = [], outcome
        else:
            self._rows, self.rowcount = list(outcome), len(outcome)

    def fetchone(self):
        return self._rows[0] if self._rows else None

    def fetchall(self):
        return list(self._rows)


@pytest.fixture
def fake_mysql() -> FakeMySQL:
    return FakeMySQL()
