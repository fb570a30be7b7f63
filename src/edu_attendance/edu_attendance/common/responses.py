from __future__ import annotations

from typing import Any, Optional, Sequence

from flask import current_app, jsonify

from ..core.exceptions import DomainError, NotFoundError, ValidationError


def success_response(data: Any, message: str = "Success", status_code: int = 200):
    return jsonify({"success": True, "message": message, "data": data}), status_code


def created_response(data: Any, message: str = "Created successfully"):
    return success_response(data, message, 201)


def error_response(message: str = "Error occurred", status_code: int = 500, errors: Optional[Sequence[str]] = None):
    body: dict = {"success": False, "message": message}
    if errors:
        body["errors"] = list(errors)
    return jsonify(body), status_code


def domain_error_response(exc: DomainError):
    """Map a domain exception to its envelope and status code."""
    if isinstance(exc, ValidationError):
        return error_response(exc.message, 400, exc.errors)
    if isinstance(exc, NotFoundError):
        return error_response(exc.message, 404)
    return error_response(exc.message, 400)


def server_error_response(message: str, exc: Exception):
    body: dict = {"success": False, "message": message}
    if current_app.config.get("DEBUG"):
        body["error"] = str(exc)
    return jsonify(body), 500
