from __future__ import annotations

from typing import Optional, Sequence, Tuple

from mysql.connector import IntegrityError

from ..core.enums import AttendanceStatus
from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, raise_for_integrity_error
from .model import AttendanceRecord, NewAttendanceRecord
from .repository import AttendanceRepository

_ENRICHED_SELECT = """
    SELECT a.Id, a.SessionId, a.StudentCode, a.Status, a.AttendanceDate, a.CreatedDate,
           s.SessionName, st.StudentName, st.StudentNickname
    FROM AttendanceRecords a
    LEFT JOIN Sessions s ON a.SessionId = s.Id
    LEFT JOIN Student st ON a.StudentCode = st.StudentCode
"""

_DUPLICATE = "Attendance record already exists for this student in this session"
_MISSING_REFERENCE = "Session or student not found"


def _to_record(r: dict) -> AttendanceRecord:
    return AttendanceRecord(
        attendance_id=int(r["Id"]),
        session_id=int(r["SessionId"]),
        student_code=r["StudentCode"],
        status=AttendanceStatus(r["Status"]),
        attendance_date=r["AttendanceDate"],
        created_date=r.get("CreatedDate"),
        session_name=r.get("SessionName"),
        student_name=r.get("StudentName"),
        student_nickname=r.get("StudentNickname"),
    )


class MySQLAttendanceRepository(AttendanceRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_ENRICHED_SELECT} ORDER BY a.AttendanceDate DESC, a.CreatedDate DESC")
            return [_to_record(r) for r in fetchall(cur)]

    def list_for_session(self, session_id: int) -> Sequence[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_ENRICHED_SELECT} WHERE a.SessionId=%s ORDER BY st.StudentName", (int(session_id),))
            return [_to_record(r) for r in fetchall(cur)]

    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_ENRICHED_SELECT} WHERE a.Id=%s", (int(attendance_id),))
            r = fetchone(cur)
            return _to_record(r) if r else None

    def pair_exists(self, *, session_id: int, student_code: str, exclude_id: Optional[int] = None) -> bool:
        clauses = ["SessionId=%s", "StudentCode=%s"]
        params: list[object] = [int(session_id), student_code]
        if exclude_id is not None:
            clauses.append("Id<>%s")
            params.append(int(exclude_id))

        where = " AND ".join(clauses)

        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT Id FROM AttendanceRecords WHERE {where}", tuple(params))
            return fetchone(cur) is not None

    def create(self, data: NewAttendanceRecord) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            try:
                cur.execute(
                    """
                    INSERT INTO AttendanceRecords(SessionId, StudentCode, Status, AttendanceDate)
                    VALUES(%s,%s,%s,%s)
                    """,
                    (int(data.session_id), data.student_code, data.status.value, data.attendance_date),
                )
            except IntegrityError as e:
                raise_for_integrity_error(e, duplicate=_DUPLICATE, missing_reference=_MISSING_REFERENCE)
            return int(cur.lastrowid)

    def update(self, attendance_id: int, data: NewAttendanceRecord) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            try:
                cur.execute(
                    """
                    UPDATE AttendanceRecords
                    SET SessionId=%s, StudentCode=%s, Status=%s, AttendanceDate=%s
                    WHERE Id=%s
                    """,
                    (
                        int(data.session_id),
                        data.student_code,
                        data.status.value,
                        data.attendance_date,
                        int(attendance_id),
                    ),
                )
            except IntegrityError as e:
                raise_for_integrity_error(
                    e,
                    duplicate="Another attendance record already exists for this student in this session",
                    missing_reference=_MISSING_REFERENCE,
                )
            return cur.rowcount > 0

    def upsert(self, data: NewAttendanceRecord) -> Tuple[int, bool]:
        with db_cursor(self._conn_factory) as (_, cur):
            try:
                cur.execute(
                    """
                    INSERT INTO AttendanceRecords(SessionId, StudentCode, Status, AttendanceDate)
                    VALUES(%s,%s,%s,%s) AS new
                    ON DUPLICATE KEY UPDATE Status=new.Status, AttendanceDate=new.AttendanceDate
                    """,
                    (int(data.session_id), data.student_code, data.status.value, data.attendance_date),
                )
            except IntegrityError as e:
                raise_for_integrity_error(e, duplicate=_DUPLICATE, missing_reference=_MISSING_REFERENCE)

            # Affected rows: 1 = inserted, 2 = updated, 0 = updated with identical values.
            created = cur.rowcount == 1
            if created and cur.lastrowid:
                return int(cur.lastrowid), True

            cur.execute(
                "SELECT Id FROM AttendanceRecords WHERE SessionId=%s AND StudentCode=%s",
                (int(data.session_id), data.student_code),
            )
            r = fetchone(cur)
            return (int(r["Id"]) if r else 0), created
