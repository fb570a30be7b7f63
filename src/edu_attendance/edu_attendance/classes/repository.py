from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import ClassEnrollment, ClassStudent, NewClassEnrollment, TeacherClass


class ClassRepository(Protocol):
    def list_all(self) -> Sequence[ClassEnrollment]:
        raise NotImplementedError

    def get_by_id(self, class_id: int) -> Optional[ClassEnrollment]:
        raise NotImplementedError

    def exists(self, data: NewClassEnrollment) -> bool:
        raise NotImplementedError

    def create(self, data: NewClassEnrollment) -> int:
        raise NotImplementedError

    def list_for_teacher(self, teacher_code: str) -> Sequence[TeacherClass]:
        raise NotImplementedError

    def list_students(self, *, teacher_code: str, campus: str, subject_set_id: str) -> Sequence[ClassStudent]:
        raise NotImplementedError
