from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import NewSubjectSet, SubjectSet


class SubjectSetRepository(Protocol):
    def list_all(self) -> Sequence[SubjectSet]:
        raise NotImplementedError

    def get_by_id(self, record_id: int) -> Optional[SubjectSet]:
        raise NotImplementedError

    def exists(self, *, campus: str, subject_set_id: str) -> bool:
        """True when the subject set is offered on the given campus."""
        raise NotImplementedError

    def create(self, data: NewSubjectSet) -> int:
        raise NotImplementedError
