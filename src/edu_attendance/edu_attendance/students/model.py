from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class Student:
    """Domain entity: Student.

    Plain data object; no database access here.
    """

    student_id: int
    student_code: str
    nickname: str
    name: str
    email: str
    campus: str
    form: str
    image: Optional[bytes] = None
    created_date: Optional[datetime] = None
    updated_date: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "Id": self.student_id,
            "StudentCode": self.student_code,
            "StudentNickname": self.nickname,
            "StudentName": self.name,
            "StudentImage": self.image,
            "EmailAddress": self.email,
            "Campus": self.campus,
            "Form": self.form,
            "CreatedDate": self.created_date,
            "UpdatedDate": self.updated_date,
        }

    def to_summary(self) -> dict:
        return {
            "Id": self.student_id,
            "StudentCode": self.student_code,
            "StudentName": self.name,
            "StudentNickname": self.nickname,
            "Campus": self.campus,
            "Form": self.form,
        }


@dataclass(frozen=True)
class NewStudent:
    student_code: str
    nickname: str
    name: str
    email: str
    campus: str
    form: str
    image: Optional[bytes] = None
