from __future__ import annotations

from typing import Optional, Sequence

from mysql.connector import IntegrityError

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, raise_for_integrity_error
from .model import ClassEnrollment, ClassStudent, NewClassEnrollment, TeacherClass
from .repository import ClassRepository

_ENRICHED_SELECT = """
    SELECT c.Id, c.Campus, c.SubjectSetID, c.TeacherCode, c.StudentCode, c.CreatedDate,
           s.Subject, t.TeacherName, st.StudentName
    FROM Class c
    LEFT JOIN SubjectSet s ON c.SubjectSetID = s.SubjectSetID AND c.Campus = s.Campus
    LEFT JOIN Teacher t ON c.TeacherCode = t.TeacherCode
    LEFT JOIN Student st ON c.StudentCode = st.StudentCode
"""


def _to_class(r: dict) -> ClassEnrollment:
    return ClassEnrollment(
        class_id=int(r["Id"]),
        campus=r["Campus"],
        subject_set_id=r["SubjectSetID"],
        teacher_code=r["TeacherCode"],
        student_code=r["StudentCode"],
        created_date=r.get("CreatedDate"),
        subject=r.get("Subject"),
        teacher_name=r.get("TeacherName"),
        student_name=r.get("StudentName"),
    )


class MySQLClassRepository(ClassRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[ClassEnrollment]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_ENRICHED_SELECT} ORDER BY c.CreatedDate DESC, c.Id DESC")
            return [_to_class(r) for r in fetchall(cur)]

    def get_by_id(self, class_id: int) -> Optional[ClassEnrollment]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"{_ENRICHED_SELECT} WHERE c.Id=%s", (int(class_id),))
            r = fetchone(cur)
            return _to_class(r) if r else None

    def exists(self, data: NewClassEnrollment) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT Id FROM Class
                WHERE Campus=%s AND SubjectSetID=%s AND TeacherCode=%s AND StudentCode=%s
                """,
                (data.campus, data.subject_set_id, data.teacher_code, data.student_code),
            )
            return fetchone(cur) is not None

    def create(self, data: NewClassEnrollment) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            try:
                cur.execute(
                    """
                    INSERT INTO Class(Campus, SubjectSetID, TeacherCode, StudentCode)
                    VALUES(%s,%s,%s,%s)
                    """,
                    (data.campus, data.subject_set_id, data.teacher_code, data.student_code),
                )
            except IntegrityError as e:
                raise_for_integrity_error(
                    e,
                    duplicate="Class enrollment already exists",
                    missing_reference="Subject set, teacher or student not found",
                )
            return int(cur.lastrowid)

    def list_for_teacher(self, teacher_code: str) -> Sequence[TeacherClass]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT
                    c.Campus,
                    c.SubjectSetID,
                    ss.Subject,
                    ss.SubjectSetDescription,
                    ss.Credits,
                    COUNT(DISTINCT c.StudentCode) AS StudentCount
                FROM Class c
                LEFT JOIN SubjectSet ss ON c.SubjectSetID = ss.SubjectSetID AND c.Campus = ss.Campus
                WHERE c.TeacherCode=%s
                GROUP BY c.Campus, c.SubjectSetID, ss.Subject, ss.SubjectSetDescription, ss.Credits
                ORDER BY ss.Subject
                """,
                (teacher_code,),
            )
            return [
                TeacherClass(
                    campus=r["Campus"],
                    subject_set_id=r["SubjectSetID"],
                    subject=r.get("Subject"),
                    description=r.get("SubjectSetDescription"),
                    credits=float(r["Credits"]) if r.get("Credits") is not None else None,
                    student_count=int(r.get("StudentCount") or 0),
                )
                for r in fetchall(cur)
            ]

    def list_students(self, *, teacher_code: str, campus: str, subject_set_id: str) -> Sequence[ClassStudent]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT DISTINCT
                    s.Id, s.StudentCode, s.StudentName, s.StudentNickname,
                    s.EmailAddress, s.Form, s.Campus
                FROM Class c
                JOIN Student s ON c.StudentCode = s.StudentCode
                WHERE c.TeacherCode=%s AND c.Campus=%s AND c.SubjectSetID=%s
                ORDER BY s.StudentName
                """,
                (teacher_code, campus, subject_set_id),
            )
            return [
                ClassStudent(
                    student_id=int(r["Id"]),
                    student_code=r["StudentCode"],
                    name=r["StudentName"],
                    nickname=r["StudentNickname"],
                    email=r["EmailAddress"],
                    form=r["Form"],
                    campus=r["Campus"],
                )
                for r in fetchall(cur)
            ]
