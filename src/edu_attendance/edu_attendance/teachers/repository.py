from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import NewTeacher, Teacher


class TeacherRepository(Protocol):
    def list_all(self) -> Sequence[Teacher]:
        raise NotImplementedError

    def list_roster(self) -> Sequence[Teacher]:
        """Teachers ordered by name, for selection lists."""
        raise NotImplementedError

    def get_by_id(self, teacher_id: int) -> Optional[Teacher]:
        raise NotImplementedError

    def get_by_code(self, teacher_code: str) -> Optional[Teacher]:
        raise NotImplementedError

    def get_summary_by_code(self, teacher_code: str) -> Optional[Teacher]:
        """Like get_by_code but without the image column."""
        raise NotImplementedError

    def code_exists(self, teacher_code: str, *, exclude_id: Optional[int] = None) -> bool:
        raise NotImplementedError

    def create(self, data: NewTeacher) -> int:
        raise NotImplementedError

    def update(self, teacher_id: int, data: NewTeacher) -> bool:
        raise NotImplementedError

    def delete_by_id(self, teacher_id: int) -> bool:
        raise NotImplementedError
