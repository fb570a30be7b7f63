from __future__ import annotations

import importlib
import logging
from pathlib import Path
from typing import Optional

from dotenv import load_dotenv
from flask import Flask, jsonify, request
from flask_cors import CORS
from werkzeug.exceptions import HTTPException, MethodNotAllowed, NotFound

from config import get_settings_module

from .attendance.controller import register as register_attendance
from .auth.controller import register as register_auth
from .classes.controller import register as register_classes
from .common import datetime_utils
from .common.responses import error_response, server_error_response
from .common.serialization import ApiJSONProvider
from .container import Container, build_container
from .database.bootstrap import apply_schema, list_tables
from .face_data.controller import register as register_face_data
from .sessions.controller import register as register_sessions
from .students.controller import register as register_students
from .subject_sets.controller import register as register_subject_sets
from .teachers.controller import register as register_teachers

logger = logging.getLogger(__name__)

SCHEMA_PATH = Path(__file__).resolve().parents[3] / "database" / "schema.sql"


def _configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, str(level).upper(), logging.INFO),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )


def _register_error_handlers(app: Flask) -> None:
    @app.errorhandler(NotFound)
    def handle_not_found(e):
        return error_response(f"Route {request.path} not found", 404)

    @app.errorhandler(MethodNotAllowed)
    def handle_method_not_allowed(e):
        return error_response(f"Method {request.method} not allowed for {request.path}", 405)

    @app.errorhandler(Exception)
    def handle_unexpected(e):
        if isinstance(e, HTTPException):
            return error_response(e.description or e.name, e.code or 500)
        logger.exception("Unhandled error on %s %s", request.method, request.path)
        return server_error_response("Internal server error", e)


def create_app(container: Optional[Container] = None) -> Flask:
    load_dotenv(override=False)
    app = Flask(__name__)

    settings_module = get_settings_module()
    settings = importlib.import_module(settings_module)
    db_config = getattr(settings, "DB_CONFIG")
    app.config["DEBUG"] = bool(getattr(settings, "DEBUG", False))
    app.config["TESTING"] = bool(getattr(settings, "TESTING", False))
    app.config["MAX_CONTENT_LENGTH"] = int(getattr(settings, "MAX_CONTENT_LENGTH", 50 * 1024 * 1024))
    app.config["PORT"] = int(getattr(settings, "PORT", 5000))

    _configure_logging(getattr(settings, "LOG_LEVEL", "INFO"))
    logger.info(
        "Starting with settings=%s db=%s@%s:%s/%s",
        settings_module,
        db_config.get("user"),
        db_config.get("host"),
        db_config.get("port", 3306),
        db_config.get("database"),
    )

    app.json = ApiJSONProvider(app)
    CORS(
        app,
        origins="*",
        methods=["GET", "POST", "PUT", "DELETE", "OPTIONS"],
        allow_headers=["Content-Type", "Authorization"],
    )

    if container is None:
        container = build_container(db_config=db_config)

    auto_init_db = bool(getattr(settings, "AUTO_INIT_DB", False))
    if auto_init_db and container.conn is not None:
        apply_schema(container.conn.config, schema_path=getattr(settings, "SCHEMA_PATH", SCHEMA_PATH))
        logger.info("Schema ready (tables=%s)", len(list_tables(container.conn.config)))

    register_students(app, container)
    register_teachers(app, container)
    register_subject_sets(app, container)
    register_classes(app, container)
    register_sessions(app, container)
    register_attendance(app, container)
    register_face_data(app, container)
    register_auth(app, container)

    @app.route("/", methods=["GET"], endpoint="health")
    def health():
        return jsonify(
            {
                "success": True,
                "message": "Educational Attendance Management API is running",
                "timestamp": datetime_utils.now_local().isoformat(),
            }
        )

    _register_error_handlers(app)
    return app


def run() -> None:
    app = create_app()
    app.run(host="0.0.0.0", port=app.config["PORT"], debug=app.config["DEBUG"])


if __name__ == "__main__":
    run()
