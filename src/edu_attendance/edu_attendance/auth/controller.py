from __future__ import annotations

import logging

from flask import Flask

from ..common.payload import json_payload
from ..common.responses import domain_error_response, server_error_response, success_response
from ..container import Container
from ..core.exceptions import DomainError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    service = container.auth_service
    attendance = container.attendance_service

    @app.route("/auth/teachers", methods=["GET"], endpoint="auth_list_teachers")
    def auth_list_teachers():
        try:
            teachers = service.list_teachers()
            return success_response([t.to_summary() for t in teachers], "Teachers retrieved for login selection")
        except Exception as e:
            logger.exception("Error fetching teachers for login")
            return server_error_response("Failed to fetch teachers", e)

    @app.route("/auth/verify-teacher-face", methods=["POST"], endpoint="verify_teacher_face")
    def verify_teacher_face():
        try:
            result = service.verify_teacher_face(json_payload())
            return success_response(result.to_dict(), "Teacher face verification data retrieved")
        except DomainError as e:
            return domain_error_response(e)
        except Exception as e:
            logger.exception("Error verifying teacher face")
            return server_error_response("Failed to verify teacher face", e)

    @app.route("/auth/teacher-classes/<teacher_code>", methods=["GET"], endpoint="teacher_classes")
    def teacher_classes(teacher_code: str):
        try:
            rows = service.teacher_classes(teacher_code)
            return success_response([r.to_dict() for r in rows], "Teacher classes retrieved successfully")
        except Exception as e:
            logger.exception("Error fetching classes for teacher %s", teacher_code)
            return server_error_response("Failed to fetch teacher classes", e)

    @app.route(
        "/auth/class-students/<teacher_code>/<campus>/<subject_set_id>",
        methods=["GET"],
        endpoint="class_students",
    )
    def class_students(teacher_code: str, campus: str, subject_set_id: str):
        try:
            rows = service.class_students(teacher_code=teacher_code, campus=campus, subject_set_id=subject_set_id)
            return success_response([r.to_dict() for r in rows], "Class students retrieved successfully")
        except Exception as e:
            logger.exception("Error fetching class students")
            return server_error_response("Failed to fetch class students", e)

    @app.route("/auth/verify-student-face", methods=["POST"], endpoint="verify_student_face")
    def verify_student_face():
        try:
            result = service.verify_student_face(json_payload())
            return success_response(result.to_dict(), "Student face verification data retrieved")
        except DomainError as e:
            return domain_error_response(e)
        except Exception as e:
            logger.exception("Error verifying student face")
            return server_error_response("Failed to verify student face", e)

    @app.route("/auth/mark-attendance", methods=["POST"], endpoint="mark_attendance")
    def mark_attendance():
        try:
            record, created = attendance.mark_attendance(json_payload())
            message = "Attendance marked successfully" if created else "Attendance updated successfully"
            return success_response(record.to_dict(), message)
        except DomainError as e:
            return domain_error_response(e)
        except Exception as e:
            logger.exception("Error marking attendance")
            return server_error_response("Failed to mark attendance", e)
