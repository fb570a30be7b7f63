from __future__ import annotations

from typing import Optional, Protocol, Sequence

from ..core.enums import PersonType
from .model import FaceData, NewFaceData, StoredDescriptor


class FaceDataRepository(Protocol):
    def list_for_person(self, person_code: str) -> Sequence[FaceData]:
        """All records for a code, newest first."""
        raise NotImplementedError

    def get_by_id(self, face_data_id: int) -> Optional[FaceData]:
        raise NotImplementedError

    def latest_descriptor(self, person_type: PersonType, person_code: str) -> Optional[StoredDescriptor]:
        """Descriptor of the most recent record for the person, ties broken by Id."""
        raise NotImplementedError

    def create(self, data: NewFaceData) -> int:
        raise NotImplementedError

    def update(self, face_data_id: int, data: NewFaceData) -> bool:
        raise NotImplementedError

    def delete_by_id(self, face_data_id: int) -> bool:
        raise NotImplementedError
