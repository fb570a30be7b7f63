from __future__ import annotations

from typing import Any, Mapping, Sequence

from ..common.payload import text
from ..common.validators import ensure_valid, validate_class
from ..core.exceptions import BusinessRuleError, NotFoundError
from ..students.repository import StudentRepository
from ..subject_sets.repository import SubjectSetRepository
from ..teachers.repository import TeacherRepository
from .model import ClassEnrollment, NewClassEnrollment
from .repository import ClassRepository


class ClassService:
    """Use cases: enrol students with a teacher in a subject set."""

    def __init__(
        self,
        classes: ClassRepository,
        subject_sets: SubjectSetRepository,
        teachers: TeacherRepository,
        students: StudentRepository,
    ):
        self._classes = classes
        self._subject_sets = subject_sets
        self._teachers = teachers
        self._students = students

    def list_classes(self) -> Sequence[ClassEnrollment]:
        return self._classes.list_all()

    def get_class(self, class_id: int) -> ClassEnrollment:
        enrollment = self._classes.get_by_id(class_id)
        if not enrollment:
            raise NotFoundError("Class")
        return enrollment

    def create_class(self, payload: Mapping[str, Any]) -> ClassEnrollment:
        ensure_valid(validate_class(payload))
        data = NewClassEnrollment(
            campus=text(payload, "Campus"),
            subject_set_id=text(payload, "SubjectSetID"),
            teacher_code=text(payload, "TeacherCode"),
            student_code=text(payload, "StudentCode"),
        )

        if not self._subject_sets.exists(campus=data.campus, subject_set_id=data.subject_set_id):
            raise BusinessRuleError("Subject set not found for this campus")
        if not self._teachers.code_exists(data.teacher_code):
            raise BusinessRuleError("Teacher not found")
        if not self._students.code_exists(data.student_code):
            raise BusinessRuleError("Student not found")
        if self._classes.exists(data):
            raise BusinessRuleError("Class enrollment already exists")

        new_id = self._classes.create(data)
        return self.get_class(new_id)
