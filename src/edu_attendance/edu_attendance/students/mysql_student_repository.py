from __future__ import annotations

from typing import Optional, Sequence

from mysql.connector import IntegrityError

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_bytes, db_cursor, fetchall, fetchone, raise_for_integrity_error
from .model import NewStudent, Student
from .repository import StudentRepository

_COLUMNS = """
    Id, StudentCode, StudentNickname, StudentName, StudentImage,
    EmailAddress, Campus, Form, CreatedDate, UpdatedDate
"""

# Summary rows skip the image blob.
_SUMMARY_COLUMNS = "Id, StudentCode, StudentNickname, StudentName, EmailAddress, Campus, Form, CreatedDate, UpdatedDate"


def _to_student(r: dict) -> Student:
    return Student(
        student_id=int(r["Id"]),
        student_code=r["StudentCode"],
        nickname=r["StudentNickname"],
        name=r["StudentName"],
        email=r["EmailAddress"],
        campus=r["Campus"],
        form=r["Form"],
        image=as_bytes(r.get("StudentImage")),
        created_date=r.get("CreatedDate"),
        updated_date=r.get("UpdatedDate"),
    )


class MySQLStudentRepository(StudentRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM Student ORDER BY CreatedDate DESC, Id DESC")
            return [_to_student(r) for r in fetchall(cur)]

    def get_by_id(self, student_id: int) -> Optional[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM Student WHERE Id=%s", (int(student_id),))
            r = fetchone(cur)
            return _to_student(r) if r else None

    def get_by_code(self, student_code: str) -> Optional[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM Student WHERE StudentCode=%s", (student_code,))
            r = fetchone(cur)
            return _to_student(r) if r else None

    def get_summary_by_code(self, student_code: str) -> Optional[Student]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_SUMMARY_COLUMNS} FROM Student WHERE StudentCode=%s", (student_code,))
            r = fetchone(cur)
            return _to_student(r) if r else None

    def code_exists(self, student_code: str, *, exclude_id: Optional[int] = None) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            if exclude_id is None:
                cur.execute("SELECT Id FROM Student WHERE StudentCode=%s", (student_code,))
            else:
                cur.execute(
                    "SELECT Id FROM Student WHERE StudentCode=%s AND Id<>%s",
                    (student_code, int(exclude_id)),
                )
            return fetchone(cur) is not None

    def create(self, data: NewStudent) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            try:
                cur.execute(
                    """
                    INSERT INTO Student(StudentCode, StudentNickname, StudentName, StudentImage, EmailAddress, Campus, Form)
                    VALUES(%s,%s,%s,%s,%s,%s,%s)
                    """,
                    (data.student_code, data.nickname, data.name, data.image, data.email, data.campus, data.form),
                )
            except IntegrityError as e:
                raise_for_integrity_error(e, duplicate="Student code already exists")
            return int(cur.lastrowid)

    def update(self, student_id: int, data: NewStudent) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            try:
                cur.execute(
                    """
                    UPDATE Student
                    SET StudentCode=%s, StudentNickname=%s, StudentName=%s, StudentImage=%s,
                        EmailAddress=%s, Campus=%s, Form=%s
                    WHERE Id=%s
                    """,
                    (
                        data.student_code,
                        data.nickname,
                        data.name,
                        data.image,
                        data.email,
                        data.campus,
                        data.form,
                        int(student_id),
                    ),
                )
            except IntegrityError as e:
                raise_for_integrity_error(e, duplicate="Student code already exists")
            return cur.rowcount > 0

    def delete_by_id(self, student_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM Student WHERE Id=%s", (int(student_id),))
            return cur.rowcount > 0
