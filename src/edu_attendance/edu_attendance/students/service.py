from __future__ import annotations

from typing import Any, Mapping, Sequence

from ..common.payload import optional_image, text
from ..common.validators import ensure_valid, validate_student
from ..core.exceptions import BusinessRuleError, NotFoundError
from .model import NewStudent, Student
from .repository import StudentRepository


class StudentService:
    """Use cases: manage student records."""

    def __init__(self, students: StudentRepository):
        self._students = students

    @staticmethod
    def _parse(payload: Mapping[str, Any]) -> NewStudent:
        ensure_valid(validate_student(payload))
        return NewStudent(
            student_code=text(payload, "StudentCode"),
            nickname=text(payload, "StudentNickname"),
            name=text(payload, "StudentName"),
            email=text(payload, "EmailAddress"),
            campus=text(payload, "Campus"),
            form=text(payload, "Form"),
            image=optional_image(payload, "StudentImage"),
        )

    def list_students(self) -> Sequence[Student]:
        return self._students.list_all()

    def get_student(self, student_id: int) -> Student:
        student = self._students.get_by_id(student_id)
        if not student:
            raise NotFoundError("Student")
        return student

    def create_student(self, payload: Mapping[str, Any]) -> Student:
        data = self._parse(payload)

        if self._students.code_exists(data.student_code):
            raise BusinessRuleError("Student code already exists")

        new_id = self._students.create(data)
        return self.get_student(new_id)

    def update_student(self, student_id: int, payload: Mapping[str, Any]) -> Student:
        data = self._parse(payload)

        self.get_student(student_id)
        if self._students.code_exists(data.student_code, exclude_id=student_id):
            raise BusinessRuleError("Student code already exists")

        self._students.update(student_id, data)
        return self.get_student(student_id)

    def delete_student(self, student_id: int) -> None:
        self.get_student(student_id)
        self._students.delete_by_id(student_id)
