from __future__ import annotations

from typing import Optional, Sequence

from mysql.connector import IntegrityError

from ..database.connection import DatabaseConnection
from ..database.mysql_base import db_cursor, fetchall, fetchone, raise_for_integrity_error
from .model import NewSubjectSet, SubjectSet
from .repository import SubjectSetRepository


def _to_subject_set(r: dict) -> SubjectSet:
    return SubjectSet(
        record_id=int(r["Id"]),
        campus=r["Campus"],
        subject_set_id=r["SubjectSetID"],
        subject=r["Subject"],
        description=r.get("SubjectSetDescription"),
        credits=float(r.get("Credits") or 0),
        created_date=r.get("CreatedDate"),
    )


class MySQLSubjectSetRepository(SubjectSetRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_all(self) -> Sequence[SubjectSet]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT Id, Campus, SubjectSetID, Subject, SubjectSetDescription, Credits, CreatedDate
                FROM SubjectSet
                ORDER BY CreatedDate DESC, Id DESC
                """
            )
            return [_to_subject_set(r) for r in fetchall(cur)]

    def get_by_id(self, record_id: int) -> Optional[SubjectSet]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT Id, Campus, SubjectSetID, Subject, SubjectSetDescription, Credits, CreatedDate
                FROM SubjectSet
                WHERE Id=%s
                """,
                (int(record_id),),
            )
            r = fetchone(cur)
            return _to_subject_set(r) if r else None

    def exists(self, *, campus: str, subject_set_id: str) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                "SELECT Id FROM SubjectSet WHERE SubjectSetID=%s AND Campus=%s",
                (subject_set_id, campus),
            )
            return fetchone(cur) is not None

    def create(self, data: NewSubjectSet) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            try:
                cur.execute(
                    """
                    INSERT INTO SubjectSet(Campus, SubjectSetID, Subject, SubjectSetDescription, Credits)
                    VALUES(%s,%s,%s,%s,%s)
                    """,
                    (data.campus, data.subject_set_id, data.subject, data.description, data.credits),
                )
            except IntegrityError as e:
                raise_for_integrity_error(e, duplicate="Subject set ID already exists for this campus")
            return int(cur.lastrowid)
