from __future__ import annotations

from typing import Any, Mapping, Sequence

from ..common.payload import optional_text, text
from ..common.validators import ensure_valid, validate_subject_set
from ..core.exceptions import BusinessRuleError, NotFoundError
from .model import NewSubjectSet, SubjectSet
from .repository import SubjectSetRepository


class SubjectSetService:
    def __init__(self, subject_sets: SubjectSetRepository):
        self._subject_sets = subject_sets

    def list_subject_sets(self) -> Sequence[SubjectSet]:
        return self._subject_sets.list_all()

    def get_subject_set(self, record_id: int) -> SubjectSet:
        subject_set = self._subject_sets.get_by_id(record_id)
        if not subject_set:
            raise NotFoundError("Subject set")
        return subject_set

    def create_subject_set(self, payload: Mapping[str, Any]) -> SubjectSet:
        ensure_valid(validate_subject_set(payload))
        data = NewSubjectSet(
            campus=text(payload, "Campus"),
            subject_set_id=text(payload, "SubjectSetID"),
            subject=text(payload, "Subject"),
            description=optional_text(payload, "SubjectSetDescription"),
            credits=float(payload["Credits"]),
        )

        if self._subject_sets.exists(campus=data.campus, subject_set_id=data.subject_set_id):
            raise BusinessRuleError("Subject set ID already exists for this campus")

        new_id = self._subject_sets.create(data)
        return self.get_subject_set(new_id)
