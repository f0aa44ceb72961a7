from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable

from .attendance.admission import AdmissionController
from .attendance.factory import AdmissionStrategyFactory
from .attendance.memory_ledger import InMemoryAttendanceLedger
from .attendance.mysql_attendance_ledger import MySQLAttendanceLedger
from .attendance.repository import AttendanceLedger
from .attendance.service import CheckInService
from .common.clock import Clock, SystemClock
from .core.constants import WARNING_THRESHOLD_DAYS
from .database.connection import DBConfig, DatabaseConnection
from .reports.service import ReportService
from .residents.memory_resident_repository import InMemoryResidentRepository
from .residents.model import Resident
from .residents.mysql_resident_repository import MySQLResidentRepository
from .residents.repository import ResidentRepository
from .residents.service import ResidentService
from .trainers.memory_trainer_repository import InMemoryTrainerRepository
from .trainers.model import Trainer
from .trainers.mysql_trainer_repository import MySQLTrainerRepository
from .trainers.repository import TrainerRepository
from .trainers.service import TrainerService


@dataclass(frozen=True)
class Container:
    clock: Clock

    residents_repo: ResidentRepository
    trainers_repo: TrainerRepository
    ledger: AttendanceLedger

    resident_service: ResidentService
    trainer_service: TrainerService
    checkin_service: CheckInService
    report_service: ReportService


def _wire(
    *,
    residents_repo: ResidentRepository,
    trainers_repo: TrainerRepository,
    ledger: AttendanceLedger,
    clock: Clock,
    warning_days: int,
) -> Container:
    controller = AdmissionController(strategy_factory=AdmissionStrategyFactory(), warning_days=warning_days)
    return Container(
        clock=clock,
        residents_repo=residents_repo,
        trainers_repo=trainers_repo,
        ledger=ledger,
        resident_service=ResidentService(residents_repo, warning_days=warning_days),
        trainer_service=TrainerService(trainers_repo),
        checkin_service=CheckInService(ledger, residents_repo, trainers_repo, controller=controller, clock=clock),
        report_service=ReportService(ledger),
    )


def build_container(
    *,
    db_config: dict,
    clock: Clock | None = None,
    warning_days: int = WARNING_THRESHOLD_DAYS,
) -> Container:
    conn = DatabaseConnection.get_instance(DBConfig.from_dict(db_config))
    return _wire(
        residents_repo=MySQLResidentRepository(conn),
        trainers_repo=MySQLTrainerRepository(conn),
        ledger=MySQLAttendanceLedger(conn),
        clock=clock or SystemClock(),
        warning_days=warning_days,
    )


def build_memory_container(
    *,
    residents: Iterable[Resident] = (),
    trainers: Iterable[Trainer] = (),
    clock: Clock | None = None,
    warning_days: int = WARNING_THRESHOLD_DAYS,
) -> Container:
    """Container backed by in-memory stores (tests, demos, STORAGE_BACKEND=memory)."""

    return _wire(
        residents_repo=InMemoryResidentRepository(residents),
        trainers_repo=InMemoryTrainerRepository(trainers),
        ledger=InMemoryAttendanceLedger(),
        clock=clock or SystemClock(),
        warning_days=warning_days,
    )
