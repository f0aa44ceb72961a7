from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_payload
from ..container import Container
from ..core.constants import DISPLAY_DATE_FORMAT
from .model import ResidentStatusView
from .service import limitation_label


def resident_json(view: ResidentStatusView) -> dict:
    r = view.resident
    return {
        "id": r.resident_id,
        "first_name": r.first_name,
        "last_name": r.last_name,
        "full_name": r.full_name,
        "medical_certificate_start_date": r.medical_certificate_start_date.isoformat(),
        "subscription_expiry": r.subscription_expiry.isoformat(),
        "subscription_expiry_display": r.subscription_expiry.strftime(DISPLAY_DATE_FORMAT),
        "training_limitation": r.training_limitation.value,
        "training_limitation_label": limitation_label(r.training_limitation, r.medical_conditions),
        "medical_conditions": r.medical_conditions or "",
        "status": view.status.value,
        "days_remaining": view.days_remaining,
    }


def register(app: Flask, container: Container) -> None:
    service = container.resident_service

    def _today():
        return container.clock.now().date()

    @app.route("/api/residents", methods=["GET"], endpoint="residents_list")
    def residents_list():
        views = service.search(request.args.get("q", ""), _today())
        return jsonify({"success": True, "residents": [resident_json(v) for v in views]})

    @app.route("/api/residents/<resident_id>", methods=["GET"], endpoint="residents_get")
    def residents_get(resident_id: str):
        view = service.status_of(service.get(resident_id), _today())
        return jsonify({"success": True, "resident": resident_json(view)})

    @app.route("/api/residents", methods=["POST"], endpoint="residents_create")
    def residents_create():
        data = json_payload()
        resident = service.create_resident(
            first_name=data.get("first_name", ""),
            last_name=data.get("last_name", ""),
            medical_certificate_start_date=data.get("medical_certificate_start_date"),
            training_limitation=data.get("training_limitation"),
            medical_conditions=data.get("medical_conditions"),
        )
        return jsonify({"success": True, "resident": resident_json(service.status_of(resident, _today()))}), 201

    @app.route("/api/residents/<resident_id>", methods=["PUT", "PATCH"], endpoint="residents_update")
    def residents_update(resident_id: str):
        data = json_payload()
        resident = service.update_resident(
            resident_id,
            first_name=data.get("first_name"),
            last_name=data.get("last_name"),
            medical_certificate_start_date=data.get("medical_certificate_start_date"),
            training_limitation=data.get("training_limitation"),
            medical_conditions=data.get("medical_conditions"),
        )
        return jsonify({"success": True, "resident": resident_json(service.status_of(resident, _today()))})

    @app.route("/api/residents/<resident_id>", methods=["DELETE"], endpoint="residents_delete")
    def residents_delete(resident_id: str):
        service.delete_resident(resident_id)
        return jsonify({"success": True})
