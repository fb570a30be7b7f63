from __future__ import annotations

from typing import Any, Mapping, Sequence, Tuple

from ..common import datetime_utils
from ..common.payload import text
from ..common.validators import ensure_valid, is_blank, validate_attendance, validate_mark_attendance
from ..core.enums import AttendanceStatus
from ..core.exceptions import BusinessRuleError, NotFoundError
from ..sessions.repository import SessionRepository
from ..students.repository import StudentRepository
from .model import AttendanceRecord, NewAttendanceRecord
from .repository import AttendanceRepository


class AttendanceService:
    def __init__(self, attendance: AttendanceRepository, sessions: SessionRepository, students: StudentRepository):
        self._attendance = attendance
        self._sessions = sessions
        self._students = students

    def _check_references(self, data: NewAttendanceRecord) -> None:
        if not self._sessions.exists(data.session_id):
            raise BusinessRuleError("Session not found")
        if not self._students.code_exists(data.student_code):
            raise BusinessRuleError("Student not found")

    @staticmethod
    def _parse(payload: Mapping[str, Any]) -> NewAttendanceRecord:
        ensure_valid(validate_attendance(payload))
        return NewAttendanceRecord(
            session_id=int(payload["SessionId"]),
            student_code=text(payload, "StudentCode"),
            status=AttendanceStatus(payload["Status"]),
            attendance_date=datetime_utils.parse_iso_date(str(payload["AttendanceDate"])),
        )

    def list_records(self) -> Sequence[AttendanceRecord]:
        return self._attendance.list_all()

    def list_for_session(self, session_id: int) -> Sequence[AttendanceRecord]:
        if not self._sessions.exists(session_id):
            raise NotFoundError("Session")
        return self._attendance.list_for_session(session_id)

    def get_record(self, attendance_id: int) -> AttendanceRecord:
        record = self._attendance.get_by_id(attendance_id)
        if not record:
            raise NotFoundError("Attendance record")
        return record

    def create_record(self, payload: Mapping[str, Any]) -> AttendanceRecord:
        data = self._parse(payload)
        self._check_references(data)
        if self._attendance.pair_exists(session_id=data.session_id, student_code=data.student_code):
            raise BusinessRuleError("Attendance record already exists for this student in this session")

        new_id = self._attendance.create(data)
        return self.get_record(new_id)

    def update_record(self, attendance_id: int, payload: Mapping[str, Any]) -> AttendanceRecord:
        data = self._parse(payload)
        self.get_record(attendance_id)
        self._check_references(data)
        if self._attendance.pair_exists(
            session_id=data.session_id,
            student_code=data.student_code,
            exclude_id=attendance_id,
        ):
            raise BusinessRuleError("Another attendance record already exists for this student in this session")

        self._attendance.update(attendance_id, data)
        return self.get_record(attendance_id)

    def mark_attendance(self, payload: Mapping[str, Any]) -> Tuple[AttendanceRecord, bool]:
        """Record a face-verified attendance mark.

        Upserts on (session, student): a repeated mark overwrites status and
        date instead of adding a row. Status defaults to Present and the date
        to today. Returns the stored record and whether it was newly created.
        """
        if is_blank(payload.get("SessionId")) or is_blank(payload.get("StudentCode")):
            raise BusinessRuleError("SessionId and StudentCode are required")
        ensure_valid(validate_mark_attendance(payload))

        status = payload.get("Status")
        attendance_date = payload.get("AttendanceDate")
        data = NewAttendanceRecord(
            session_id=int(payload["SessionId"]),
            student_code=text(payload, "StudentCode"),
            status=AttendanceStatus(status) if not is_blank(status) else AttendanceStatus.PRESENT,
            attendance_date=(
                datetime_utils.parse_iso_date(str(attendance_date))
                if not is_blank(attendance_date)
                else datetime_utils.today()
            ),
        )
        self._check_references(data)

        attendance_id, created = self._attendance.upsert(data)
        return self.get_record(attendance_id), created
