from __future__ import annotations

from typing import Any, Mapping, Sequence

from ..common.datetime_utils import parse_clock_time, parse_iso_date
from ..common.payload import text
from ..common.validators import ensure_valid, validate_session
from ..core.exceptions import BusinessRuleError, NotFoundError
from ..subject_sets.repository import SubjectSetRepository
from ..teachers.repository import TeacherRepository
from .model import ClassSession, NewClassSession
from .repository import SessionRepository


class SessionService:
    def __init__(self, sessions: SessionRepository, subject_sets: SubjectSetRepository, teachers: TeacherRepository):
        self._sessions = sessions
        self._subject_sets = subject_sets
        self._teachers = teachers

    @staticmethod
    def _parse(payload: Mapping[str, Any]) -> NewClassSession:
        ensure_valid(validate_session(payload))
        return NewClassSession(
            name=text(payload, "SessionName"),
            subject_set_id=text(payload, "SubjectSetID"),
            teacher_code=text(payload, "TeacherCode"),
            campus=text(payload, "Campus"),
            session_date=parse_iso_date(str(payload["SessionDate"])),
            start_time=parse_clock_time(str(payload["StartTime"])),
            end_time=parse_clock_time(str(payload["EndTime"])),
        )

    def _check_rules(self, data: NewClassSession) -> None:
        # Compared as clock times; "9:00" vs "13:00" must not sort as strings.
        if data.start_time >= data.end_time:
            raise BusinessRuleError("Start time must be before end time")
        if not self._subject_sets.exists(campus=data.campus, subject_set_id=data.subject_set_id):
            raise BusinessRuleError("Subject set not found for this campus")
        if not self._teachers.code_exists(data.teacher_code):
            raise BusinessRuleError("Teacher not found")

    def list_sessions(self) -> Sequence[ClassSession]:
        return self._sessions.list_all()

    def get_session(self, session_id: int) -> ClassSession:
        session = self._sessions.get_by_id(session_id)
        if not session:
            raise NotFoundError("Session")
        return session

    def create_session(self, payload: Mapping[str, Any]) -> ClassSession:
        data = self._parse(payload)
        self._check_rules(data)
        new_id = self._sessions.create(data)
        return self.get_session(new_id)

    def update_session(self, session_id: int, payload: Mapping[str, Any]) -> ClassSession:
        data = self._parse(payload)
        if not self._sessions.exists(session_id):
            raise NotFoundError("Session")
        self._check_rules(data)
        self._sessions.update(session_id, data)
        return self.get_session(session_id)
