from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import NewStudent, Student


class StudentRepository(Protocol):
    """Repository interface for Student.

    Services depend on this interface, not on a concrete database.
    """

    def list_all(self) -> Sequence[Student]:
        raise NotImplementedError

    def get_by_id(self, student_id: int) -> Optional[Student]:
        raise NotImplementedError

    def get_by_code(self, student_code: str) -> Optional[Student]:
        raise NotImplementedError

    def get_summary_by_code(self, student_code: str) -> Optional[Student]:
        """Like get_by_code but without the image column."""
        raise NotImplementedError

    def code_exists(self, student_code: str, *, exclude_id: Optional[int] = None) -> bool:
        raise NotImplementedError

    def create(self, data: NewStudent) -> int:
        raise NotImplementedError

    def update(self, student_id: int, data: NewStudent) -> bool:
        raise NotImplementedError

    def delete_by_id(self, student_id: int) -> bool:
        raise NotImplementedError
