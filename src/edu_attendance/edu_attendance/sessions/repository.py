from __future__ import annotations

from typing import Optional, Protocol, Sequence

from .model import ClassSession, NewClassSession


class SessionRepository(Protocol):
    def list_all(self) -> Sequence[ClassSession]:
        raise NotImplementedError

    def get_by_id(self, session_id: int) -> Optional[ClassSession]:
        raise NotImplementedError

    def exists(self, session_id: int) -> bool:
        raise NotImplementedError

    def create(self, data: NewClassSession) -> int:
        raise NotImplementedError

    def update(self, session_id: int, data: NewClassSession) -> bool:
        raise NotImplementedError
