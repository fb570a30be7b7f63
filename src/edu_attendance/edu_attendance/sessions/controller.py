from __future__ import annotations

import logging

from flask import Flask

from ..common.payload import json_payload
from ..common.responses import created_response, domain_error_response, server_error_response, success_response
from ..container import Container
from ..core.exceptions import DomainError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    service = container.session_service

    @app.route("/sessions", methods=["GET"], endpoint="list_sessions")
    def list_sessions():
        try:
            rows = service.list_sessions()
            return success_response([s.to_dict() for s in rows], "Sessions retrieved successfully")
        except Exception as e:
            logger.exception("Error fetching sessions")
            return server_error_response("Failed to fetch sessions", e)

    @app.route("/sessions/<int:session_id>", methods=["GET"], endpoint="get_session")
    def get_session(session_id: int):
        try:
            session = service.get_session(session_id)
            return success_response(session.to_dict(), "Session retrieved successfully")
        except DomainError as e:
            return domain_error_response(e)
        except Exception as e:
            logger.exception("Error fetching session %s", session_id)
            return server_error_response("Failed to fetch session", e)

    @app.route("/sessions", methods=["POST"], endpoint="create_session")
    def create_session():
        try:
            session = service.create_session(json_payload())
            return created_response(session.to_dict(), "Session created successfully")
        except DomainError as e:
            return domain_error_response(e)
        except Exception as e:
            logger.exception("Error creating session")
            return server_error_response("Failed to create session", e)

    @app.route("/sessions/<int:session_id>", methods=["PUT"], endpoint="update_session")
    def update_session(session_id: int):
        try:
            session = service.update_session(session_id, json_payload())
            return success_response(session.to_dict(), "Session updated successfully")
        except DomainError as e:
            return domain_error_response(e)
        except Exception as e:
            logger.exception("Error updating session %s", session_id)
            return server_error_response("Failed to update session", e)
