from __future__ import annotations

from flask import Flask, jsonify, request

from ..common.http import json_payload, parse_bool
from ..container import Container
from .model import Trainer


def trainer_json(t: Trainer) -> dict:
    return {"id": t.trainer_id, "name": t.name, "active": t.active}


def register(app: Flask, container: Container) -> None:
    service = container.trainer_service

    @app.route("/api/trainers", methods=["GET"], endpoint="trainers_list")
    def trainers_list():
        # ?active=1 returns only trainers selectable at the front desk.
        only_active = parse_bool(request.args.get("active"), default=False)
        trainers = service.list_active() if only_active else service.list_trainers()
        return jsonify({"success": True, "trainers": [trainer_json(t) for t in trainers]})

    @app.route("/api/trainers", methods=["POST"], endpoint="trainers_create")
    def trainers_create():
        data = json_payload()
        trainer = service.create_trainer(name=data.get("name", ""), active=parse_bool(data.get("active"), default=True))
        return jsonify({"success": True, "trainer": trainer_json(trainer)}), 201

    @app.route("/api/trainers/<trainer_id>", methods=["PUT", "PATCH"], endpoint="trainers_update")
    def trainers_update(trainer_id: str):
        data = json_payload()
        trainer = service.update_trainer(trainer_id, name=data.get("name"), active=parse_bool(data.get("active")))
        return jsonify({"success": True, "trainer": trainer_json(trainer)})

    @app.route("/api/trainers/<trainer_id>", methods=["DELETE"], endpoint="trainers_delete")
    def trainers_delete(trainer_id: str):
        service.delete_trainer(trainer_id)
        return jsonify({"success": True})
