from __future__ import annotations

import logging

from flask import Flask

from ..common.payload import json_payload
from ..common.responses import created_response, domain_error_response, server_error_response, success_response
from ..container import Container
from ..core.exceptions import DomainError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    service = container.class_service

    @app.route("/classes", methods=["GET"], endpoint="list_classes")
    def list_classes():
        try:
            rows = service.list_classes()
            return success_response([c.to_dict() for c in rows], "Classes retrieved successfully")
        except Exception as e:
            logger.exception("Error fetching classes")
            return server_error_response("Failed to fetch classes", e)

    @app.route("/classes/<int:class_id>", methods=["GET"], endpoint="get_class")
    def get_class(class_id: int):
        try:
            enrollment = service.get_class(class_id)
            return success_response(enrollment.to_dict(), "Class retrieved successfully")
        except DomainError as e:
            return domain_error_response(e)
        except Exception as e:
            logger.exception("Error fetching class %s", class_id)
            return server_error_response("Failed to fetch class", e)

    @app.route("/classes", methods=["POST"], endpoint="create_class")
    def create_class():
        try:
            enrollment = service.create_class(json_payload())
            return created_response(enrollment.to_dict(), "Class created successfully")
        except DomainError as e:
            return domain_error_response(e)
        except Exception as e:
            logger.exception("Error creating class")
            return server_error_response("Failed to create class", e)
