from __future__ import annotations

from flask import Flask, jsonify, request

from ..attendance.model import ReportFilter
from ..common.datetime_utils import month_range
from ..common.validators import require_date
from ..container import Container
from ..core.constants import DISPLAY_DATETIME_FORMAT
from ..core.enums import ReportViewMode
from ..core.exceptions import ValidationError
from .export import write_csv
from .model import ReportData


def _parse_mode(value: str | None) -> ReportViewMode:
    try:
        return ReportViewMode((value or ReportViewMode.DETAILED.value).strip().lower())
    except ValueError:
        raise ValidationError(f"Unknown report mode: {value!r}") from None


def _report_json(report: ReportData, criteria: ReportFilter) -> dict:
    return {
        "success": True,
        "mode": report.mode.value,
        "filter": {
            "start": criteria.start_date.isoformat() if criteria.start_date else None,
            "end": criteria.end_date.isoformat() if criteria.end_date else None,
            "trainer_id": criteria.trainer_id,
            "resident": criteria.resident_name_contains,
        },
        "total": len(report.rows),
        "rows": [
            {
                "id": r.record_id,
                "date": r.date,
                "time": r.time,
                "resident_id": r.resident_id,
                "resident_name": r.resident_name,
                "trainer_id": r.trainer_id,
                "trainer_name": r.trainer_name,
            }
            for r in report.rows
        ],
        "summary": [
            {
                "id": s.resident_id,
                "name": s.name,
                "count": s.count,
                "last_visit": s.last_visit.strftime(DISPLAY_DATETIME_FORMAT),
            }
            for s in report.summary
        ],
        "chart": [{"name": p.name, "value": p.value} for p in report.chart],
    }


def register(app: Flask, container: Container) -> None:
    service = container.report_service

    def _filter_from_args() -> ReportFilter:
        # Same default as the reports screen: the current calendar month.
        default_start, default_end = month_range(container.clock.now().date())
        start_raw = request.args.get("start")
        end_raw = request.args.get("end")
        start = require_date(start_raw, "Start date") if start_raw else default_start
        end = require_date(end_raw, "End date") if end_raw else default_end
        if start > end:
            raise ValidationError("Start date must not be after end date")
        return ReportFilter(
            start_date=start,
            end_date=end,
            trainer_id=request.args.get("trainer_id") or None,
            resident_name_contains=request.args.get("resident") or None,
        )

    @app.route("/api/reports", methods=["GET"], endpoint="reports_view")
    def reports_view():
        criteria = _filter_from_args()
        report = service.build_report(criteria, _parse_mode(request.args.get("mode")))
        return jsonify(_report_json(report, criteria))

    @app.route("/api/reports/export.csv", methods=["GET"], endpoint="reports_export_csv")
    def reports_export_csv():
        table = service.export(_filter_from_args(), _parse_mode(request.args.get("mode")))
        return app.response_class(
            write_csv(table),
            mimetype="text/csv",
            headers={"Content-Disposition": f"attachment; filename={table.filename}"},
        )
