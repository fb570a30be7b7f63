from __future__ import annotations

import logging

from flask import Flask

from ..common.payload import json_payload
from ..common.responses import created_response, domain_error_response, server_error_response, success_response
from ..container import Container
from ..core.exceptions import DomainError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    service = container.attendance_service

    @app.route("/attendance", methods=["GET"], endpoint="list_attendance")
    def list_attendance():
        try:
            rows = service.list_records()
            return success_response([r.to_dict() for r in rows], "Attendance records retrieved successfully")
        except Exception as e:
            logger.exception("Error fetching attendance records")
            return server_error_response("Failed to fetch attendance records", e)

    @app.route("/attendance/session/<int:session_id>", methods=["GET"], endpoint="list_session_attendance")
    def list_session_attendance(session_id: int):
        try:
            rows = service.list_for_session(session_id)
            return success_response([r.to_dict() for r in rows], "Session attendance records retrieved successfully")
        except DomainError as e:
            return domain_error_response(e)
        except Exception as e:
            logger.exception("Error fetching attendance for session %s", session_id)
            return server_error_response("Failed to fetch session attendance records", e)

    @app.route("/attendance", methods=["POST"], endpoint="create_attendance")
    def create_attendance():
        try:
            record = service.create_record(json_payload())
            return created_response(record.to_dict(), "Attendance record created successfully")
        except DomainError as e:
            return domain_error_response(e)
        except Exception as e:
            logger.exception("Error creating attendance record")
            return server_error_response("Failed to create attendance record", e)

    @app.route("/attendance/<int:attendance_id>", methods=["PUT"], endpoint="update_attendance")
    def update_attendance(attendance_id: int):
        try:
            record = service.update_record(attendance_id, json_payload())
            return success_response(record.to_dict(), "Attendance record updated successfully")
        except DomainError as e:
            return domain_error_response(e)
        except Exception as e:
            logger.exception("Error updating attendance record %s", attendance_id)
            return server_error_response("Failed to update attendance record", e)
