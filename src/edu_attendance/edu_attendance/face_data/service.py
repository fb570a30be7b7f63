from __future__ import annotations

import base64
from typing import Any, Mapping, Sequence

from ..common.payload import optional_text, text
from ..common.validators import ensure_valid, validate_face_data
from ..core.constants import DEFAULT_CONTENT_TYPE
from ..core.enums import PersonType
from ..core.exceptions import BusinessRuleError, NotFoundError
from ..students.repository import StudentRepository
from ..teachers.repository import TeacherRepository
from .model import FaceData, NewFaceData
from .repository import FaceDataRepository


class FaceDataService:
    def __init__(self, face_data: FaceDataRepository, students: StudentRepository, teachers: TeacherRepository):
        self._face_data = face_data
        self._students = students
        self._teachers = teachers

    @staticmethod
    def _parse(payload: Mapping[str, Any]) -> NewFaceData:
        ensure_valid(validate_face_data(payload))
        return NewFaceData(
            person_type=PersonType(payload["PersonType"]),
            person_code=text(payload, "PersonCode"),
            image_data=base64.b64decode(payload["ImageData"]),
            face_descriptor=optional_text(payload, "FaceDescriptor"),
            original_name=optional_text(payload, "OriginalName"),
            content_type=optional_text(payload, "ContentType") or DEFAULT_CONTENT_TYPE,
        )

    def _check_person(self, data: NewFaceData) -> None:
        if data.person_type is PersonType.STUDENT:
            if not self._students.code_exists(data.person_code):
                raise BusinessRuleError("Student not found")
        elif not self._teachers.code_exists(data.person_code):
            raise BusinessRuleError("Teacher not found")

    def list_for_person(self, person_code: str) -> Sequence[FaceData]:
        rows = self._face_data.list_for_person(person_code)
        if not rows:
            raise NotFoundError("Face data")
        return rows

    def get_face_data(self, face_data_id: int) -> FaceData:
        row = self._face_data.get_by_id(face_data_id)
        if not row:
            raise NotFoundError("Face data")
        return row

    def create_face_data(self, payload: Mapping[str, Any]) -> FaceData:
        data = self._parse(payload)
        self._check_person(data)
        new_id = self._face_data.create(data)
        return self.get_face_data(new_id)

    def update_face_data(self, face_data_id: int, payload: Mapping[str, Any]) -> FaceData:
        data = self._parse(payload)
        self.get_face_data(face_data_id)
        self._check_person(data)
        self._face_data.update(face_data_id, data)
        return self.get_face_data(face_data_id)

    def delete_face_data(self, face_data_id: int) -> None:
        self.get_face_data(face_data_id)
        self._face_data.delete_by_id(face_data_id)
