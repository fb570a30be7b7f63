from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import AttendanceStatus


@dataclass(frozen=True)
class AttendanceRecord:
    """Domain entity: one student's attendance in one session.

    session_name/student_name/student_nickname are display fields filled by joins.
    """

    attendance_id: int
    session_id: int
    student_code: str
    status: AttendanceStatus
    attendance_date: date
    created_date: Optional[datetime] = None
    session_name: Optional[str] = None
    student_name: Optional[str] = None
    student_nickname: Optional[str] = None

    def to_dict(self) -> dict:
        return {
            "Id": self.attendance_id,
            "SessionId": self.session_id,
            "StudentCode": self.student_code,
            "Status": self.status.value,
            "AttendanceDate": self.attendance_date,
            "CreatedDate": self.created_date,
            "SessionName": self.session_name,
            "StudentName": self.student_name,
            "StudentNickname": self.student_nickname,
        }


@dataclass(frozen=True)
class NewAttendanceRecord:
    session_id: int
    student_code: str
    status: AttendanceStatus
    attendance_date: date
