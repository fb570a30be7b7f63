from __future__ import annotations

import logging

from flask import Flask

from ..common.payload import json_payload
from ..common.responses import created_response, domain_error_response, server_error_response, success_response
from ..container import Container
from ..core.exceptions import DomainError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    service = container.teacher_service

    @app.route("/teachers", methods=["GET"], endpoint="list_teachers")
    def list_teachers():
        try:
            teachers = service.list_teachers()
            return success_response([t.to_dict() for t in teachers], "Teachers retrieved successfully")
        except Exception as e:
            logger.exception("Error fetching teachers")
            return server_error_response("Failed to fetch teachers", e)

    @app.route("/teachers/<int:teacher_id>", methods=["GET"], endpoint="get_teacher")
    def get_teacher(teacher_id: int):
        try:
            teacher = service.get_teacher(teacher_id)
            return success_response(teacher.to_dict(), "Teacher retrieved successfully")
        except DomainError as e:
            return domain_error_response(e)
        except Exception as e:
            logger.exception("Error fetching teacher %s", teacher_id)
            return server_error_response("Failed to fetch teacher", e)

    @app.route("/teachers", methods=["POST"], endpoint="create_teacher")
    def create_teacher():
        try:
            teacher = service.create_teacher(json_payload())
            return created_response(teacher.to_dict(), "Teacher created successfully")
        except DomainError as e:
            return domain_error_response(e)
        except Exception as e:
            logger.exception("Error creating teacher")
            return server_error_response("Failed to create teacher", e)

    @app.route("/teachers/<int:teacher_id>", methods=["PUT"], endpoint="update_teacher")
    def update_teacher(teacher_id: int):
        try:
            teacher = service.update_teacher(teacher_id, json_payload())
            return success_response(teacher.to_dict(), "Teacher updated successfully")
        except DomainError as e:
            return domain_error_response(e)
        except Exception as e:
            logger.exception("Error updating teacher %s", teacher_id)
            return server_error_response("Failed to update teacher", e)

    @app.route("/teachers/<int:teacher_id>", methods=["DELETE"], endpoint="delete_teacher")
    def delete_teacher(teacher_id: int):
        try:
            service.delete_teacher(teacher_id)
            return success_response(None, "Teacher deleted successfully")
        except DomainError as e:
            return domain_error_response(e)
        except Exception as e:
            logger.exception("Error deleting teacher %s", teacher_id)
            return server_error_response("Failed to delete teacher", e)
