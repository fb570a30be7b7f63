from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Sequence

from ..classes.model import ClassStudent, TeacherClass
from ..classes.repository import ClassRepository
from ..common.payload import text
from ..common.validators import is_blank
from ..core.enums import PersonType
from ..core.exceptions import BusinessRuleError, NotFoundError
from ..face_data.repository import FaceDataRepository
from ..students.repository import StudentRepository
from ..teachers.model import Teacher
from ..teachers.repository import TeacherRepository


@dataclass(frozen=True)
class FaceVerification:
    """Stored and provided descriptors side by side.

    The server never compares them; the client decides whether they match.
    """

    person_key: str
    person: dict
    stored_descriptor: Optional[str]
    provided_descriptor: Any
    message: str
    session_id: Any = None
    include_session: bool = False

    def to_dict(self) -> dict:
        body = {
            self.person_key: self.person,
            "storedFaceDescriptor": self.stored_descriptor,
            "providedFaceDescriptor": self.provided_descriptor,
        }
        if self.include_session:
            body["sessionId"] = self.session_id
        body["message"] = self.message
        return body


class AuthService:
    """Use cases behind the face-login and class roll-call screens."""

    def __init__(
        self,
        teachers: TeacherRepository,
        students: StudentRepository,
        classes: ClassRepository,
        face_data: FaceDataRepository,
    ):
        self._teachers = teachers
        self._students = students
        self._classes = classes
        self._face_data = face_data

    def list_teachers(self) -> Sequence[Teacher]:
        return self._teachers.list_roster()

    def verify_teacher_face(self, payload: Mapping[str, Any]) -> FaceVerification:
        if is_blank(payload.get("TeacherCode")) or is_blank(payload.get("FaceDescriptor")):
            raise BusinessRuleError("TeacherCode and FaceDescriptor are required")
        teacher_code = text(payload, "TeacherCode")

        stored = self._face_data.latest_descriptor(PersonType.TEACHER, teacher_code)
        if not stored:
            raise NotFoundError("Face data", "No face data found for this teacher. Please register face first.")

        teacher = self._teachers.get_summary_by_code(teacher_code)
        if not teacher:
            raise NotFoundError("Teacher")

        return FaceVerification(
            person_key="teacher",
            person=teacher.to_summary(),
            stored_descriptor=stored.face_descriptor,
            provided_descriptor=payload["FaceDescriptor"],
            message="Face descriptors retrieved for comparison",
        )

    def verify_student_face(self, payload: Mapping[str, Any]) -> FaceVerification:
        if is_blank(payload.get("StudentCode")) or is_blank(payload.get("FaceDescriptor")):
            raise BusinessRuleError("StudentCode and FaceDescriptor are required")
        student_code = text(payload, "StudentCode")

        stored = self._face_data.latest_descriptor(PersonType.STUDENT, student_code)
        if not stored:
            raise NotFoundError("Face data", "No face data found for this student. Please register face first.")

        student = self._students.get_summary_by_code(student_code)
        if not student:
            raise NotFoundError("Student")

        return FaceVerification(
            person_key="student",
            person=student.to_summary(),
            stored_descriptor=stored.face_descriptor,
            provided_descriptor=payload["FaceDescriptor"],
            message="Student face descriptors retrieved for comparison",
            session_id=payload.get("SessionId"),
            include_session=True,
        )

    def teacher_classes(self, teacher_code: str) -> Sequence[TeacherClass]:
        return self._classes.list_for_teacher(teacher_code)

    def class_students(self, *, teacher_code: str, campus: str, subject_set_id: str) -> Sequence[ClassStudent]:
        return self._classes.list_students(teacher_code=teacher_code, campus=campus, subject_set_id=subject_set_id)
