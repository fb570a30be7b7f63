from __future__ import annotations

from typing import Optional, Sequence

from mysql.connector import IntegrityError

from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_bytes, db_cursor, fetchall, fetchone, raise_for_integrity_error
from .model import NewTeacher, Teacher
from .repository import TeacherRepository

_COLUMNS = """
    Id, TeacherCode, TeacherNickname, TeacherName, TeacherImage,
    EmailAddress, Campus, Department, CreatedDate, UpdatedDate
"""

# Roster rows skip the image blob.
_ROSTER_COLUMNS = "Id, TeacherCode, TeacherNickname, TeacherName, EmailAddress, Campus, Department, CreatedDate, UpdatedDate"


def _to_teacher(r: dict) -> Teacher:
    return Teacher(
        teacher_id=int(r["Id"]),
        teacher_code=r["TeacherCode"],
        nickname=r["TeacherNickname"],
        name=r["TeacherName"],
        email=r["EmailAddress"],
        campus=r["Campus"],
        department=r["Department"],
        image=as_bytes(r.get("TeacherImage")),
        created_date=r.get("CreatedDate"),
        updated_date=r.get("UpdatedDate"),
    )


class MySQLTeacherRepository(TeacherRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[Teacher]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM Teacher ORDER BY CreatedDate DESC, Id DESC")
            return [_to_teacher(r) for r in fetchall(cur)]

    def list_roster(self) -> Sequence[Teacher]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_ROSTER_COLUMNS} FROM Teacher ORDER BY TeacherName ASC")
            return [_to_teacher(r) for r in fetchall(cur)]

    def get_by_id(self, teacher_id: int) -> Optional[Teacher]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM Teacher WHERE Id=%s", (int(teacher_id),))
            r = fetchone(cur)
            return _to_teacher(r) if r else None

    def get_by_code(self, teacher_code: str) -> Optional[Teacher]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM Teacher WHERE TeacherCode=%s", (teacher_code,))
            r = fetchone(cur)
            return _to_teacher(r) if r else None

    def get_summary_by_code(self, teacher_code: str) -> Optional[Teacher]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_ROSTER_COLUMNS} FROM Teacher WHERE TeacherCode=%s", (teacher_code,))
            r = fetchone(cur)
            return _to_teacher(r) if r else None

    def code_exists(self, teacher_code: str, *, exclude_id: Optional[int] = None) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            if exclude_id is None:
                cur.execute("SELECT Id FROM Teacher WHERE TeacherCode=%s", (teacher_code,))
            else:
                cur.execute(
                    "SELECT Id FROM Teacher WHERE TeacherCode=%s AND Id<>%s",
                    (teacher_code, int(exclude_id)),
                )
            return fetchone(cur) is not None

    def create(self, data: NewTeacher) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            try:
                cur.execute(
                    """
                    INSERT INTO Teacher(TeacherCode, TeacherNickname, TeacherName, TeacherImage, EmailAddress, Campus, Department)
                    VALUES(%s,%s,%s,%s,%s,%s,%s)
                    """,
                    (data.teacher_code, data.nickname, data.name, data.image, data.email, data.campus, data.department),
                )
            except IntegrityError as e:
                raise_for_integrity_error(e, duplicate="Teacher code already exists")
            return int(cur.lastrowid)

    def update(self, teacher_id: int, data: NewTeacher) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            try:
                cur.execute(
                    """
                    UPDATE Teacher
                    SET TeacherCode=%s, TeacherNickname=%s, TeacherName=%s, TeacherImage=%s,
                        EmailAddress=%s, Campus=%s, Department=%s
                    WHERE Id=%s
                    """,
                    (
                        data.teacher_code,
                        data.nickname,
                        data.name,
                        data.image,
                        data.email,
                        data.campus,
                        data.department,
                        int(teacher_id),
                    ),
                )
            except IntegrityError as e:
                raise_for_integrity_error(e, duplicate="Teacher code already exists")
            return cur.rowcount > 0

    def delete_by_id(self, teacher_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM Teacher WHERE Id=%s", (int(teacher_id),))
            return cur.rowcount > 0
