from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Teacher:
    """Domain entity: Teacher."""

    teacher_id: int
    teacher_code: str
    nickname: str
    name: str
    email: str
    campus: str
    department: str
    image: Optional[bytes] = None
    created_date: Optional[datetime] = None
    updated_date: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "Id": self.teacher_id,
            "TeacherCode": self.teacher_code,
            "TeacherNickname": self.nickname,
            "TeacherName": self.name,
            "TeacherImage": self.image,
            "EmailAddress": self.email,
            "Campus": self.campus,
            "Department": self.department,
            "CreatedDate": self.created_date,
            "UpdatedDate": self.updated_date,
        }

    def to_summary(self) -> dict:
        return {
            "Id": self.teacher_id,
            "TeacherCode": self.teacher_code,
            "TeacherName": self.name,
            "TeacherNickname": self.nickname,
            "Campus": self.campus,
            "Department": self.department,
        }


@dataclass(frozen=True)
class NewTeacher:
    teacher_code: str
    nickname: str
    name: str
    email: str
    campus: str
    department: str
    image: Optional[bytes] = None
