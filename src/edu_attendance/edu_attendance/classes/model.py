from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class ClassEnrollment:
    """One student enrolled with one teacher in a subject set on a campus.

    subject/teacher_name/student_name are display fields filled by joins.
    """

    class_id: int
    campus: str
    subject_set_id: str
    teacher_code: str
    student_code: str
    created_date: Optional[datetime] = None
    subject: Optional[str] = None
    teacher_name: Optional[str] = None
    student_name: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "Id": self.class_id,
            "Campus": self.campus,
            "SubjectSetID": self.subject_set_id,
            "TeacherCode": self.teacher_code,
            "StudentCode": self.student_code,
            "CreatedDate": self.created_date,
            "Subject": self.subject,
            "TeacherName": self.teacher_name,
            "StudentName": self.student_name,
        }


@dataclass(frozen=True)
class NewClassEnrollment:
    campus: str
    subject_set_id: str
    teacher_code: str
    student_code: str


@dataclass(frozen=True)
class TeacherClass:
    """Read-model: a (campus, subject set) a teacher runs, with head count."""

    campus: str
    subject_set_id: str
    subject: Optional[str]
    description: Optional[str]
    credits: Optional[float]
    student_count: int

    def to_dict(self) -> dict:
        return {
            "Campus": self.campus,
            "SubjectSetID": self.subject_set_id,
            "Subject": self.subject,
            "SubjectSetDescription": self.description,
            "Credits": self.credits,
            "StudentCount": self.student_count,
        }


@dataclass(frozen=True)
class ClassStudent:
    student_id: int
    student_code: str
    name: str
    nickname: str
    email: str
    form: str
    campus: str

    def to_dict(self) -> dict:
        return {
            "Id": self.student_id,
            "StudentCode": self.student_code,
            "StudentName": self.name,
            "StudentNickname": self.nickname,
            "EmailAddress": self.email,
            "Form": self.form,
            "Campus": self.campus,
        }
