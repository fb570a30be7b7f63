from __future__ import annotations

from typing import Optional, Sequence

from mysql.connector import IntegrityError

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, normalize_mysql_time, raise_for_integrity_error
from .model import ClassSession, NewClassSession
from .repository import SessionRepository

_ENRICHED_SELECT = """
    SELECT s.Id, s.SessionName, s.SubjectSetID, s.TeacherCode, s.Campus,
           s.SessionDate, s.StartTime, s.EndTime, s.CreatedDate,
           ss.Subject, t.TeacherName
    FROM Sessions s
    LEFT JOIN SubjectSet ss ON s.SubjectSetID = ss.SubjectSetID AND s.Campus = ss.Campus
    LEFT JOIN Teacher t ON s.TeacherCode = t.TeacherCode
"""

_MISSING_REFERENCE = "Subject set or teacher not found"


def _to_session(r: dict) -> ClassSession:
    return ClassSession(
        session_id=int(r["Id"]),
        name=r["SessionName"],
        subject_set_id=r["SubjectSetID"],
        teacher_code=r["TeacherCode"],
        campus=r["Campus"],
        session_date=r["SessionDate"],
        start_time=normalize_mysql_time(r["StartTime"]),
        end_time=normalize_mysql_time(r["EndTime"]),
        created_date=r.get("CreatedDate"),
        subject=r.get("Subject"),
        teacher_name=r.get("TeacherName"),
    )


class MySQLSessionRepository(SessionRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[ClassSession]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_ENRICHED_SELECT} ORDER BY s.SessionDate DESC, s.StartTime DESC")
            return [_to_session(r) for r in fetchall(cur)]

    def get_by_id(self, session_id: int) -> Optional[ClassSession]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_ENRICHED_SELECT} WHERE s.Id=%s", (int(session_id),))
            r = fetchone(cur)
            return _to_session(r) if r else None

    def exists(self, session_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("SELECT Id FROM Sessions WHERE Id=%s", (int(session_id),))
            return fetchone(cur) is not None

    def create(self, data: NewClassSession) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            try:
                cur.execute(
                    """
                    INSERT INTO Sessions(SessionName, SubjectSetID, TeacherCode, Campus, SessionDate, StartTime, EndTime)
                    VALUES(%s,%s,%s,%s,%s,%s,%s)
                    """,
                    (
                        data.name,
                        data.subject_set_id,
                        data.teacher_code,
                        data.campus,
                        data.session_date,
                        data.start_time,
                        data.end_time,
                    ),
                )
            except IntegrityError as e:
                raise_for_integrity_error(e, duplicate="Session already exists", missing_reference=_MISSING_REFERENCE)
            return int(cur.lastrowid)

    def update(self, session_id: int, data: NewClassSession) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            try:
                cur.execute(
                    """
                    UPDATE Sessions
                    SET SessionName=%s, SubjectSetID=%s, TeacherCode=%s, Campus=%s,
                        SessionDate=%s, StartTime=%s, EndTime=%s
                    WHERE Id=%s
                    """,
                    (
                        data.name,
                        data.subject_set_id,
                        data.teacher_code,
                        data.campus,
                        data.session_date,
                        data.start_time,
                        data.end_time,
                        int(session_id),
                    ),
                )
            except IntegrityError as e:
                raise_for_integrity_error(e, duplicate="Session already exists", missing_reference=_MISSING_REFERENCE)
            return cur.rowcount > 0
