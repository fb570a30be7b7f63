from __future__ import annotations

from typing import Optional, Sequence

from ..core.constants import DEFAULT_CONTENT_TYPE
from ..core.enums import PersonType
from ..database.connection import DatabaseConnection
from ..database.mysql_base import as_bytes, db_cursor, fetchall, fetchone
from .model import FaceData, NewFaceData, StoredDescriptor
from .repository import FaceDataRepository

_COLUMNS = """
    Id, PersonType, PersonCode, ImageData, FaceDescriptor,
    OriginalName, ContentType, CreatedDate
"""


def _to_face_data(r: dict) -> FaceData:
    return FaceData(
        face_data_id=int(r["Id"]),
        person_type=PersonType(r["PersonType"]),
        person_code=r["PersonCode"],
        image_data=as_bytes(r["ImageData"]) or b"",
        face_descriptor=r.get("FaceDescriptor"),
        original_name=r.get("OriginalName"),
        content_type=r.get("ContentType") or DEFAULT_CONTENT_TYPE,
        created_date=r.get("CreatedDate"),
    )


class MySQLFaceDataRepository(FaceDataRepository):
    def __init__(self, conn_factory: DatabaseConnection):
        self._conn_factory = conn_factory

    def list_for_person(self, person_code: str) -> Sequence[FaceData]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                f"SELECT {_COLUMNS} FROM FaceData WHERE PersonCode=%s ORDER BY CreatedDate DESC, Id DESC",
                (person_code,),
            )
            return [_to_face_data(r) for r in fetchall(cur)]

    def get_by_id(self, face_data_id: int) -> Optional[FaceData]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(f"SELECT {_COLUMNS} FROM FaceData WHERE Id=%s", (int(face_data_id),))
            r = fetchone(cur)
            return _to_face_data(r) if r else None

    def latest_descriptor(self, person_type: PersonType, person_code: str) -> Optional[StoredDescriptor]:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                SELECT Id, FaceDescriptor
                FROM FaceData
                WHERE PersonType=%s AND PersonCode=%s
                ORDER BY CreatedDate DESC, Id DESC
                LIMIT 1
                """,
                (person_type.value, person_code),
            )
            r = fetchone(cur)
            if not r:
                return None
            return StoredDescriptor(face_data_id=int(r["Id"]), face_descriptor=r.get("FaceDescriptor"))

    def create(self, data: NewFaceData) -> int:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                INSERT INTO FaceData(PersonType, PersonCode, ImageData, FaceDescriptor, OriginalName, ContentType)
                VALUES(%s,%s,%s,%s,%s,%s)
                """,
                (
                    data.person_type.value,
                    data.person_code,
                    data.image_data,
                    data.face_descriptor,
                    data.original_name,
                    data.content_type,
                ),
            )
            return int(cur.lastrowid)

    def update(self, face_data_id: int, data: NewFaceData) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute(
                """
                UPDATE FaceData
                SET PersonType=%s, PersonCode=%s, ImageData=%s, FaceDescriptor=%s, OriginalName=%s, ContentType=%s
                WHERE Id=%s
                """,
                (
                    data.person_type.value,
                    data.person_code,
                    data.image_data,
                    data.face_descriptor,
                    data.original_name,
                    data.content_type,
                    int(face_data_id),
                ),
            )
            return cur.rowcount > 0

    def delete_by_id(self, face_data_id: int) -> bool:
        with db_cursor(self._conn_factory) as (_, cur):
            cur.execute("DELETE FROM FaceData WHERE Id=%s", (int(face_data_id),))
            return cur.rowcount > 0
