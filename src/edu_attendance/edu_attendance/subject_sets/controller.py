from __future__ import annotations

import logging

from flask import Flask

from ..common.payload import json_payload
from ..common.responses import created_response, domain_error_response, server_error_response, success_response
from ..container import Container
from ..core.exceptions import DomainError

logger = logging.getLogger(__name__)


def register(app: Flask, container: Container) -> None:
    service = container.subject_set_service

    @app.route("/subject-sets", methods=["GET"], endpoint="list_subject_sets")
    def list_subject_sets():
        try:
            rows = service.list_subject_sets()
            return success_response([s.to_dict() for s in rows], "Subject sets retrieved successfully")
        except Exception as e:
            logger.exception("Error fetching subject sets")
            return server_error_response("Failed to fetch subject sets", e)

    @app.route("/subject-sets/<int:record_id>", methods=["GET"], endpoint="get_subject_set")
    def get_subject_set(record_id: int):
        try:
            subject_set = service.get_subject_set(record_id)
            return success_response(subject_set.to_dict(), "Subject set retrieved successfully")
        except DomainError as e:
            return domain_error_response(e)
        except Exception as e:
            logger.exception("Error fetching subject set %s", record_id)
            return server_error_response("Failed to fetch subject set", e)

    @app.route("/subject-sets", methods=["POST"], endpoint="create_subject_set")
    def create_subject_set():
        try:
            subject_set = service.create_subject_set(json_payload())
            return created_response(subject_set.to_dict(), "Subject set created successfully")
        except DomainError as e:
            return domain_error_response(e)
        except Exception as e:
            logger.exception("Error creating subject set")
            return server_error_response("Failed to create subject set", e)
