from __future__ import annotations

from typing import Optional, Protocol, Sequence, Tuple

from .model import AttendanceRecord, NewAttendanceRecord


class AttendanceRepository(Protocol):
    def list_all(self) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def list_for_session(self, session_id: int) -> Sequence[AttendanceRecord]:
        raise NotImplementedError

    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        raise NotImplementedError

    def pair_exists(self, *, session_id: int, student_code: str, exclude_id: Optional[int] = None) -> bool:
        """True when (session, student) already has a record other than ``exclude_id``."""
        raise NotImplementedError

    def create(self, data: NewAttendanceRecord) -> int:
        raise NotImplementedError

    def update(self, attendance_id: int, data: NewAttendanceRecord) -> bool:
        raise NotImplementedError

    def upsert(self, data: NewAttendanceRecord) -> Tuple[int, bool]:
        """Insert or update keyed by (session, student).

        Returns (attendance_id, created).
        """
        raise NotImplementedError
