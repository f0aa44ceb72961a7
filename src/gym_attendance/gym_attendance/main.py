from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .common.http import register_error_handlers
from .container import Container, build_container, build_memory_container
from .core.constants import WARNING_THRESHOLD_DAYS
from .database.bootstrap import apply_schema, apply_seed_sql, list_tables
from .reports.controller import register as register_reports
from .residents.controller import register as register_residents
from .trainers.controller import register as register_trainers

logger = logging.getLogger(__name__)

DATABASE_DIR = Path(__file__).resolve().parents[3] / "database"


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def _build_from_settings(settings) -> Container:
    warning_days = int(getattr(settings, "WARNING_THRESHOLD_DAYS", WARNING_THRESHOLD_DAYS))
    backend = str(getattr(settings, "STORAGE_BACKEND", "mysql")).lower()
    if backend == "memory":
        return build_memory_container(warning_days=warning_days)

    db_config = getattr(settings, "DB_CONFIG")
    logger.info(
        "Using MySQL %s@%s:%s/%s",
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    if bool(getattr(settings, "AUTO_INIT_DB", False)):
        apply_schema(db_config, schema_path=DATABASE_DIR / "schema.sql")
        logger.info("Schema ready (tables=%s)", len(list_tables(db_config)))
    if bool(getattr(settings, "AUTO_SEED_DB", False)):
        apply_seed_sql(db_config, seed_path=DATABASE_DIR / "seed.sql")
        logger.info("Demo seed ready")

    return build_container(db_config=db_config, warning_days=warning_days)


def create_app(container: Optional[Container] = None, *, settings_module: Optional[str] = None) -> Flask:
    load_dotenv(override=False)
    settings_module = settings_module or get_settings_module()
    settings = importlib.import_module(settings_module)
    _configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))

    app = Flask(__name__)
    app.secret_key = getattr(settings, "SECRET_KEY")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.json.ensure_ascii = False

    logger.info("Starting gym-attendance with settings=%s", settings_module)
    if container is None:
        container = _build_from_settings(settings)
    app.extensions["gym_attendance"] = container

    register_error_handlers(app)
    register_residents(app, container)
    register_trainers(app, container)
    register_attendance(app, container)
    register_reports(app, container)

    @app.route("/api/health", methods=["GET"], endpoint="health")
    def health():
        return jsonify({"success": True, "status": "ok"})

    return app
