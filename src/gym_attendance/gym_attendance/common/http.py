from __future__ import annotations

import logging
from typing import Any, Optional

from flask import Flask, jsonify, request

from ..core.exceptions import (
    ClearanceExpiredError,
    DomainError,
    DuplicateCheckInError,
    NotFoundError,
    StoreError,
    ValidationError,
)

logger = logging.getLogger(__name__)

_STATUS_BY_ERROR: list[tuple[type[DomainError], int, str]] = [
    (ClearanceExpiredError, 403, "clearance_expired"),
    (DuplicateCheckInError, 409, "duplicate_check_in"),
    (NotFoundError, 404, "not_found"),
    (ValidationError, 400, "validation_error"),
]


def error_body(code: str, message: str):
    return jsonify({"success": False, "error": code, "message": message})


def register_error_handlers(app: Flask) -> None:
    """Translate domain errors into JSON responses for every controller."""

    @app.errorhandler(DomainError)
    def handle_domain_error(exc: DomainError):
        for error_type, status, code in _STATUS_BY_ERROR:
            if isinstance(exc, error_type):
                return error_body(code, str(exc)), status
        return error_body("domain_error", str(exc)), 400

    @app.errorhandler(StoreError)
    def handle_store_error(exc: StoreError):
        logger.exception("Storage failure on %s %s", request.method, request.path)
        return error_body("store_error", "The operation could not be completed, please try again"), 500


def json_payload() -> dict[str, Any]:
    data = request.get_json(silent=True)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValidationError("Request body must be a JSON object")
    return data


def parse_bool(value: Any, *, default: Optional[bool] = None) -> Optional[bool]:
    if value is None:
        return default
    if isinstance(value, bool):
        return value
    text = str(value).strip().lower()
    if text in {"1", "true", "yes", "on"}:
        return True
    if text in {"0", "false", "no", "off"}:
        return False
    raise ValidationError(f"Invalid boolean value: {value!r}")
