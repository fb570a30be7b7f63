from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.constants import DEFAULT_CONTENT_TYPE
from ..core.enums import PersonType


@dataclass(frozen=True)
class FaceData:
    """A stored face image for a student or teacher.

    face_descriptor is the JSON text the client computed; it is stored and
    handed back verbatim, never interpreted here.
    """

    face_data_id: int
    person_type: PersonType
    person_code: str
    image_data: bytes
    face_descriptor: Optional[str] = None
    original_name: Optional[str] = None
    content_type: str = DEFAULT_CONTENT_TYPE
    created_date: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "Id": self.face_data_id,
            "PersonType": self.person_type.value,
            "PersonCode": self.person_code,
            "ImageData": self.image_data,
            "FaceDescriptor": self.face_descriptor,
            "OriginalName": self.original_name,
            "ContentType": self.content_type,
            "CreatedDate": self.created_date,
        }


@dataclass(frozen=True)
class NewFaceData:
    person_type: PersonType
    person_code: str
    image_data: bytes
    face_descriptor: Optional[str]
    original_name: Optional[str]
    content_type: str


@dataclass(frozen=True)
class StoredDescriptor:
    """Descriptor of a person's latest face record, read without the image."""

    face_data_id: int
    face_descriptor: Optional[str]
