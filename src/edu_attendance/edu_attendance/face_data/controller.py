from __future__ import annotations

import logging

from flask import Flask

from ..common.payload import json_payload
from ..common.responses import created_response, domain_error_response, server_error_response, success_response
from ..container import Container
from ..core.exceptions import DomainError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    service = container.face_data_service

    @app.route("/face-data/<person_code>", methods=["GET"], endpoint="list_face_data")
    def list_face_data(person_code: str):
        try:
            rows = service.list_for_person(person_code)
            return success_response([r.to_dict() for r in rows], "Face data retrieved successfully")
        except DomainError as e:
            return domain_error_response(e)
        except Exception as e:
            logger.exception("Error fetching face data for %s", person_code)
            return server_error_response("Failed to fetch face data", e)

    @app.route("/face-data", methods=["POST"], endpoint="create_face_data")
    def create_face_data():
        try:
            row = service.create_face_data(json_payload())
            return created_response(row.to_dict(), "Face data created successfully")
        except DomainError as e:
            return domain_error_response(e)
        except Exception as e:
            logger.exception("Error creating face data")
            return server_error_response("Failed to create face data", e)

    @app.route("/face-data/<int:face_data_id>", methods=["PUT"], endpoint="update_face_data")
    def update_face_data(face_data_id: int):
        try:
            row = service.update_face_data(face_data_id, json_payload())
            return success_response(row.to_dict(), "Face data updated successfully")
        except DomainError as e:
            return domain_error_response(e)
        except Exception as e:
            logger.exception("Error updating face data %s", face_data_id)
            return server_error_response("Failed to update face data", e)

    @app.route("/face-data/<int:face_data_id>", methods=["DELETE"], endpoint="delete_face_data")
    def delete_face_data(face_data_id: int):
        try:
            service.delete_face_data(face_data_id)
            return success_response(None, "Face data deleted successfully")
        except DomainError as e:
            return domain_error_response(e)
        except Exception as e:
            logger.exception("Error deleting face data %s", face_data_id)
            return server_error_response("Failed to delete face data", e)
