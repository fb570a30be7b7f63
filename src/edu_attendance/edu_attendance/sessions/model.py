from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime, time
from typing import Optional


@dataclass(frozen=True)
class ClassSession:
    """A scheduled teaching session; start_time is always before end_time."""

    session_id: int
    name: str
    subject_set_id: str
    teacher_code: str
    campus: str
    session_date: date
    start_time: time
    end_time: time
    created_date: Optional[datetime] = None
    subject: Optional[str] = None
    teacher_name: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "Id": self.session_id,
            "SessionName": self.name,
            "SubjectSetID": self.subject_set_id,
            "TeacherCode": self.teacher_code,
            "Campus": self.campus,
            "SessionDate": self.session_date,
            "StartTime": self.start_time,
            "EndTime": self.end_time,
            "CreatedDate": self.created_date,
            "Subject": self.subject,
            "TeacherName": self.teacher_name,
        }


@dataclass(frozen=True)
class NewClassSession:
    name: str
    subject_set_id: str
    teacher_code: str
    campus: str
    session_date: date
    start_time: time
    end_time: time
