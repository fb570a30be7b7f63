from __future__ import annotations

from typing import Any, Mapping, Sequence

from ..common.payload import optional_image, text
from ..common.validators import ensure_valid, validate_teacher
from ..core.exceptions import BusinessRuleError, NotFoundError
from .model import NewTeacher, Teacher
from .repository import TeacherRepository


class TeacherService:
    """Use cases: manage teacher records (mirrors StudentService)."""

    def __init__(self, teachers: TeacherRepository):
        self._teachers = teachers

    @staticmethod
    def _parse(payload: Mapping[str, Any]) -> NewTeacher:
        ensure_valid(validate_teacher(payload))
        return NewTeacher(
            teacher_code=text(payload, "TeacherCode"),
            nickname=text(payload, "TeacherNickname"),
            name=text(payload, "TeacherName"),
            email=text(payload, "EmailAddress"),
            campus=text(payload, "Campus"),
            department=text(payload, "Department"),
            image=optional_image(payload, "TeacherImage"),
        )

    def list_teachers(self) -> Sequence[Teacher]:
        return self._teachers.list_all()

    def get_teacher(self, teacher_id: int) -> Teacher:
        teacher = self._teachers.get_by_id(teacher_id)
        if not teacher:
            raise NotFoundError("Teacher")
        return teacher

    def create_teacher(self, payload: Mapping[str, Any]) -> Teacher:
        data = self._parse(payload)

        if self._teachers.code_exists(data.teacher_code):
            raise BusinessRuleError("Teacher code already exists")

        new_id = self._teachers.create(data)
        return self.get_teacher(new_id)

    def update_teacher(self, teacher_id: int, payload: Mapping[str, Any]) -> Teacher:
        data = self._parse(payload)

        self.get_teacher(teacher_id)
        if self._teachers.code_exists(data.teacher_code, exclude_id=teacher_id):
            raise BusinessRuleError("Teacher code already exists")

        self._teachers.update(teacher_id, data)
        return self.get_teacher(teacher_id)

    def delete_teacher(self, teacher_id: int) -> None:
        self.get_teacher(teacher_id)
        self._teachers.delete_by_id(teacher_id)
