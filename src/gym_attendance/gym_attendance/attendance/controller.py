from __future__ import annotations

from flask import Flask, jsonify

from ..common.http import json_payload
from ..container import Container
from ..core.constants import DISPLAY_DATE_FORMAT, DISPLAY_TIME_FORMAT
from .model import CheckInRecord


def record_json(r: CheckInRecord) -> dict:
    return {
        "id": r.record_id,
        "resident_id": r.resident_id,
        "resident_name": r.resident_name,
        "trainer_id": r.trainer_id,
        "trainer_name": r.trainer_name,
        "timestamp": r.timestamp.isoformat(),
        "date": r.timestamp.strftime(DISPLAY_DATE_FORMAT),
        "time": r.timestamp.strftime(DISPLAY_TIME_FORMAT),
    }


def register(app: Flask, container: Container) -> None:
    service = container.checkin_service

    @app.route("/api/checkins", methods=["POST"], endpoint="checkins_create")
    def checkins_create():
        data = json_payload()
        result = service.check_in(data.get("resident_id"), data.get("trainer_id"))
        return (
            jsonify(
                {
                    "success": True,
                    "message": "Checked in successfully",
                    "advisory": result.advisory,
                    "record": record_json(result.record),
                }
            ),
            201,
        )

    @app.route("/api/checkins/today", methods=["GET"], endpoint="checkins_today")
    def checkins_today():
        records = service.todays_check_ins()
        return jsonify({"success": True, "count": len(records), "records": [record_json(r) for r in records]})

    @app.route("/api/checkins/today", methods=["DELETE"], endpoint="checkins_purge_today")
    def checkins_purge_today():
        removed = service.purge_today()
        return jsonify({"success": True, "removed": removed})

    @app.route("/api/checkins/<record_id>", methods=["DELETE"], endpoint="checkins_delete")
    def checkins_delete(record_id: str):
        service.delete_record(record_id)
        return jsonify({"success": True})
