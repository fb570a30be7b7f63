from __future__ import annotations

import logging

from flask import Flask

from ..common.payload import json_payload
from ..common.responses import created_response, domain_error_response, server_error_response, success_response
from ..container import Container
from ..core.exceptions import DomainError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    service = container.student_service

    @app.route("/students", methods=["GET"], endpoint="list_students")
    def list_students():
        try:
            students = service.list_students()
            return success_response([s.to_dict() for s in students], "Students retrieved successfully")
        except Exception as e:
            logger.exception("Error fetching students")
            return server_error_response("Failed to fetch students", e)

    @app.route("/students/<int:student_id>", methods=["GET"], endpoint="get_student")
    def get_student(student_id: int):
        try:
            student = service.get_student(student_id)
            return success_response(student.to_dict(), "Student retrieved successfully")
        except DomainError as e:
            return domain_error_response(e)
        except Exception as e:
            logger.exception("Error fetching student %s", student_id)
            return server_error_response("Failed to fetch student", e)

    @app.route("/students", methods=["POST"], endpoint="create_student")
    def create_student():
        try:
            student = service.create_student(json_payload())
            return created_response(student.to_dict(), "Student created successfully")
        except DomainError as e:
            return domain_error_response(e)
        except Exception as e:
            logger.exception("Error creating student")
            return server_error_response("Failed to create student", e)

    @app.route("/students/<int:student_id>", methods=["PUT"], endpoint="update_student")
    def update_student(student_id: int):
        try:
            student = service.update_student(student_id, json_payload())
            return success_response(student.to_dict(), "Student updated successfully")
        except DomainError as e:
            return domain_error_response(e)
        except Exception as e:
            logger.exception("Error updating student %s", student_id)
            return server_error_response("Failed to update student", e)

    @app.route("/students/<int:student_id>", methods=["DELETE"], endpoint="delete_student")
    def delete_student(student_id: int):
        try:
            service.delete_student(student_id)
            return success_response(None, "Student deleted successfully")
        except DomainError as e:
            return domain_error_response(e)
        except Exception as e:
            logger.exception("Error deleting student %s", student_id)
            return server_error_response("Failed to delete student", e)
