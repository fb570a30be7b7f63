from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass(frozen=True)
class SubjectSet:
    """A subject offering, unique per (campus, subject_set_id)."""

    record_id: int
    campus: str
    subject_set_id: str
    subject: str
    description: Optional[str]
    credits: float
    created_date: Optional[datetime] = None

    def to_dict(self) -> dict:
        return {
            "Id": self.record_id,
            "Campus": self.campus,
            "SubjectSetID": self.subject_set_id,
            "Subject": self.subject,
            "SubjectSetDescription": self.description,
            "Credits": self.credits,
            "CreatedDate": self.created_date,
        }


@dataclass(frozen=True)
class NewSubjectSet:
    campus: str
    subject_set_id: str
    subject: str
    description: Optional[str]
    credits: float
