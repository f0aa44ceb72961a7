"""Example: drive the service layer directly (no Flask, in-memory stores).

Controllers stay thin; check-in rules and reports live in the services.
"""

from datetime import date, datetime

from src.gym_attendance.gym_attendance.attendance.model import ReportFilter
from src.gym_attendance.gym_attendance.common.clock import FixedClock
from src.gym_attendance.gym_attendance.container import build_memory_container
from src.gym_attendance.gym_attendance.core.enums import ReportViewMode
from src.gym_attendance.gym_attendance.core.exceptions import AdmissionError
from src.gym_attendance.gym_attendance.reports.export import write_csv
from src.gym_attendance.gym_attendance.residents.model import Resident
from src.gym_attendance.gym_attendance.trainers.model import Trainer


def main():
    clock = FixedClock(datetime(2025, 1, 1, 9, 30))
    container = build_memory_container(
        residents=[
            Resident("r1", "Arie", "Elzas", date(2024, 6, 1)),
            Resident("r2", "Yosef", "On", date(2024, 1, 10)),
            Resident("r3", "Rivka", "Bensadon", date(2023, 1, 10)),
        ],
        trainers=[Trainer("t1", "Ran Meged")],
        clock=clock,
    )

    for view in container.resident_service.list_with_status(clock.today()):
        print(f"{view.full_name:<20} {view.status.value:<8} {view.days_remaining}")

    for resident_id in ("r1", "r2", "r3", "r1"):
        try:
            result = container.checkin_service.check_in(resident_id, "t1")
            print("admitted", result.record.resident_name, result.advisory or "")
        except AdmissionError as exc:
            print("refused", resident_id, exc)

    table = container.report_service.export(
        ReportFilter(start_date=date(2025, 1, 1), end_date=date(2025, 1, 31)),
        ReportViewMode.AGGREGATED,
    )
    print(write_csv(table).decode("utf-8-sig"))


if __name__ == "__main__":
    main()
