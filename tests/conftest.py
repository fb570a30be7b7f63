from __future__ import annotations

from dataclasses import replace
from datetime import datetime, timedelta
from typing import Optional

import pytest

from edu_attendance.attendance.model import AttendanceRecord, NewAttendanceRecord
from edu_attendance.classes.model import ClassEnrollment, ClassStudent, NewClassEnrollment, TeacherClass
from edu_attendance.container import wire
from edu_attendance.face_data.model import FaceData, NewFaceData, StoredDescriptor
from edu_attendance.sessions.model import ClassSession, NewClassSession
from edu_attendance.students.model import NewStudent, Student
from edu_attendance.subject_sets.model import NewSubjectSet, SubjectSet
from edu_attendance.teachers.model import NewTeacher, Teacher
from payloads import session_payload, student_payload, subject_set_payload, teacher_payload

BASE_TIME = datetime(2025, 3, 1, 8, 0, 0)


class _Clock:
    """Strictly increasing CreatedDate values so ordering is deterministic."""

    def __init__(self):
        self._ticks = 0

    def next(self) -> datetime:
        self._ticks += 1
        return BASE_TIME + timedelta(seconds=self._ticks)


class InMemoryStudents:
    def __init__(self, clock: _Clock):
        self._clock = clock
        self._rows: dict[int, Student] = {}
        self._next_id = 1

    def list_all(self):
        return sorted(self._rows.values(), key=lambda s: (s.created_date, s.student_id), reverse=True)

    def get_by_id(self, student_id: int) -> Optional[Student]:
        return self._rows.get(int(student_id))

    def get_by_code(self, student_code: str) -> Optional[Student]:
        return next((s for s in self._rows.values() if s.student_code == student_code), None)

    def get_summary_by_code(self, student_code: str) -> Optional[Student]:
        student = next((s for s in self._rows.values() if s.student_code == student_code), None)
        return replace(student, image=None) if student else None

    def code_exists(self, student_code: str, *, exclude_id: Optional[int] = None) -> bool:
        return any(s.student_code == student_code and s.student_id != exclude_id for s in self._rows.values())

    def create(self, data: NewStudent) -> int:
        sid = self._next_id
        self._next_id += 1
        now = self._clock.next()
        self._rows[sid] = Student(
            student_id=sid,
            student_code=data.student_code,
            nickname=data.nickname,
            name=data.name,
            email=data.email,
            campus=data.campus,
            form=data.form,
            image=data.image,
            created_date=now,
            updated_date=now,
        )
        return sid

    def update(self, student_id: int, data: NewStudent) -> bool:
        current = self._rows.get(int(student_id))
        if not current:
            return False
        self._rows[current.student_id] = replace(
            current,
            student_code=data.student_code,
            nickname=data.nickname,
            name=data.name,
            email=data.email,
            campus=data.campus,
            form=data.form,
            image=data.image,
            updated_date=self._clock.next(),
        )
        return True

    def delete_by_id(self, student_id: int) -> bool:
        return self._rows.pop(int(student_id), None) is not None


class InMemoryTeachers:
    def __init__(self, clock: _Clock):
        self._clock = clock
        self._rows: dict[int, Teacher] = {}
        self._next_id = 1

    def list_all(self):
        return sorted(self._rows.values(), key=lambda t: (t.created_date, t.teacher_id), reverse=True)

    def list_roster(self):
        return sorted(self._rows.values(), key=lambda t: t.name)

    def get_by_id(self, teacher_id: int) -> Optional[Teacher]:
        return self._rows.get(int(teacher_id))

    def get_by_code(self, teacher_code: str) -> Optional[Teacher]:
        return next((t for t in self._rows.values() if t.teacher_code == teacher_code), None)

    def get_summary_by_code(self, teacher_code: str) -> Optional[Teacher]:
        teacher = next((t for t in self._rows.values() if t.teacher_code == teacher_code), None)
        return replace(teacher, image=None) if teacher else None

    def code_exists(self, teacher_code: str, *, exclude_id: Optional[int] = None) -> bool:
        return any(t.teacher_code == teacher_code and t.teacher_id != exclude_id for t in self._rows.values())

    def create(self, data: NewTeacher) -> int:
        tid = self._next_id
        self._next_id += 1
        now = self._clock.next()
        self._rows[tid] = Teacher(
            teacher_id=tid,
            teacher_code=data.teacher_code,
            nickname=data.nickname,
            name=data.name,
            email=data.email,
            campus=data.campus,
            department=data.department,
            image=data.image,
            created_date=now,
            updated_date=now,
        )
        return tid

    def update(self, teacher_id: int, data: NewTeacher) -> bool:
        current = self._rows.get(int(teacher_id))
        if not current:
            return False
        self._rows[current.teacher_id] = replace(
            current,
            teacher_code=data.teacher_code,
            nickname=data.nickname,
            name=data.name,
            email=data.email,
            campus=data.campus,
            department=data.department,
            image=data.image,
            updated_date=self._clock.next(),
        )
        return True

    def delete_by_id(self, teacher_id: int) -> bool:
        return self._rows.pop(int(teacher_id), None) is not None


class InMemorySubjectSets:
    def __init__(self, clock: _Clock):
        self._clock = clock
        self._rows: dict[int, SubjectSet] = {}
        self._next_id = 1

    def list_all(self):
        return sorted(self._rows.values(), key=lambda s: (s.created_date, s.record_id), reverse=True)

    def get_by_id(self, record_id: int) -> Optional[SubjectSet]:
        return self._rows.get(int(record_id))

    def find(self, campus: str, subject_set_id: str) -> Optional[SubjectSet]:
        return next(
            (s for s in self._rows.values() if s.campus == campus and s.subject_set_id == subject_set_id),
            None,
        )

    def exists(self, *, campus: str, subject_set_id: str) -> bool:
        return self.find(campus, subject_set_id) is not None

    def create(self, data: NewSubjectSet) -> int:
        rid = self._next_id
        self._next_id += 1
        self._rows[rid] = SubjectSet(
            record_id=rid,
            campus=data.campus,
            subject_set_id=data.subject_set_id,
            subject=data.subject,
            description=data.description,
            credits=data.credits,
            created_date=self._clock.next(),
        )
        return rid


class InMemoryClasses:
    def __init__(self, clock: _Clock, subject_sets: InMemorySubjectSets, teachers: InMemoryTeachers, students: InMemoryStudents):
        self._clock = clock
        self._subject_sets = subject_sets
        self._teachers = teachers
        self._students = students
        self._rows: dict[int, tuple[NewClassEnrollment, datetime]] = {}
        self._next_id = 1

    def _enrich(self, class_id: int) -> ClassEnrollment:
        data, created = self._rows[class_id]
        subject_set = self._subject_sets.find(data.campus, data.subject_set_id)
        teacher = self._teachers.get_by_code(data.teacher_code)
        student = self._students.get_by_code(data.student_code)
        return ClassEnrollment(
            class_id=class_id,
            campus=data.campus,
            subject_set_id=data.subject_set_id,
            teacher_code=data.teacher_code,
            student_code=data.student_code,
            created_date=created,
            subject=subject_set.subject if subject_set else None,
            teacher_name=teacher.name if teacher else None,
            student_name=student.name if student else None,
        )

    def list_all(self):
        return [self._enrich(cid) for cid in sorted(self._rows, reverse=True)]

    def get_by_id(self, class_id: int) -> Optional[ClassEnrollment]:
        return self._enrich(int(class_id)) if int(class_id) in self._rows else None

    def exists(self, data: NewClassEnrollment) -> bool:
        return any(row == data for row, _ in self._rows.values())

    def create(self, data: NewClassEnrollment) -> int:
        cid = self._next_id
        self._next_id += 1
        self._rows[cid] = (data, self._clock.next())
        return cid

    def list_for_teacher(self, teacher_code: str):
        groups: dict[tuple[str, str], set[str]] = {}
        for data, _ in self._rows.values():
            if data.teacher_code == teacher_code:
                groups.setdefault((data.campus, data.subject_set_id), set()).add(data.student_code)
        out = []
        for (campus, subject_set_id), codes in groups.items():
            subject_set = self._subject_sets.find(campus, subject_set_id)
            out.append(
                TeacherClass(
                    campus=campus,
                    subject_set_id=subject_set_id,
                    subject=subject_set.subject if subject_set else None,
                    description=subject_set.description if subject_set else None,
                    credits=subject_set.credits if subject_set else None,
                    student_count=len(codes),
                )
            )
        return sorted(out, key=lambda c: c.subject or "")

    def list_students(self, *, teacher_code: str, campus: str, subject_set_id: str):
        codes = {
            data.student_code
            for data, _ in self._rows.values()
            if (data.teacher_code, data.campus, data.subject_set_id) == (teacher_code, campus, subject_set_id)
        }
        students = [s for s in (self._students.get_by_code(c) for c in codes) if s]
        return [
            ClassStudent(
                student_id=s.student_id,
                student_code=s.student_code,
                name=s.name,
                nickname=s.nickname,
                email=s.email,
                form=s.form,
                campus=s.campus,
            )
            for s in sorted(students, key=lambda s: s.name)
        ]


class InMemorySessions:
    def __init__(self, clock: _Clock, subject_sets: InMemorySubjectSets, teachers: InMemoryTeachers):
        self._clock = clock
        self._subject_sets = subject_sets
        self._teachers = teachers
        self._rows: dict[int, tuple[NewClassSession, datetime]] = {}
        self._next_id = 1

    def _enrich(self, session_id: int) -> ClassSession:
        data, created = self._rows[session_id]
        subject_set = self._subject_sets.find(data.campus, data.subject_set_id)
        teacher = self._teachers.get_by_code(data.teacher_code)
        return ClassSession(
            session_id=session_id,
            name=data.name,
            subject_set_id=data.subject_set_id,
            teacher_code=data.teacher_code,
            campus=data.campus,
            session_date=data.session_date,
            start_time=data.start_time,
            end_time=data.end_time,
            created_date=created,
            subject=subject_set.subject if subject_set else None,
            teacher_name=teacher.name if teacher else None,
        )

    def list_all(self):
        rows = [self._enrich(sid) for sid in self._rows]
        return sorted(rows, key=lambda s: (s.session_date, s.start_time), reverse=True)

    def get_by_id(self, session_id: int) -> Optional[ClassSession]:
        return self._enrich(int(session_id)) if int(session_id) in self._rows else None

    def exists(self, session_id: int) -> bool:
        return int(session_id) in self._rows

    def create(self, data: NewClassSession) -> int:
        sid = self._next_id
        self._next_id += 1
        self._rows[sid] = (data, self._clock.next())
        return sid

    def update(self, session_id: int, data: NewClassSession) -> bool:
        if int(session_id) not in self._rows:
            return False
        self._rows[int(session_id)] = (data, self._rows[int(session_id)][1])
        return True


class InMemoryAttendance:
    def __init__(self, clock: _Clock, sessions: InMemorySessions, students: InMemoryStudents):
        self._clock = clock
        self._sessions = sessions
        self._students = students
        self._rows: dict[int, tuple[NewAttendanceRecord, datetime]] = {}
        self._next_id = 1

    def _enrich(self, attendance_id: int) -> AttendanceRecord:
        data, created = self._rows[attendance_id]
        session = self._sessions.get_by_id(data.session_id)
        student = self._students.get_by_code(data.student_code)
        return AttendanceRecord(
            attendance_id=attendance_id,
            session_id=data.session_id,
            student_code=data.student_code,
            status=data.status,
            attendance_date=data.attendance_date,
            created_date=created,
            session_name=session.name if session else None,
            student_name=student.name if student else None,
            student_nickname=student.nickname if student else None,
        )

    def list_all(self):
        rows = [self._enrich(aid) for aid in self._rows]
        return sorted(rows, key=lambda r: (r.attendance_date, r.created_date), reverse=True)

    def list_for_session(self, session_id: int):
        rows = [self._enrich(aid) for aid, (d, _) in self._rows.items() if d.session_id == int(session_id)]
        return sorted(rows, key=lambda r: r.student_name or "")

    def get_by_id(self, attendance_id: int) -> Optional[AttendanceRecord]:
        return self._enrich(int(attendance_id)) if int(attendance_id) in self._rows else None

    def _find_pair(self, session_id: int, student_code: str) -> Optional[int]:
        for aid, (d, _) in self._rows.items():
            if d.session_id == int(session_id) and d.student_code == student_code:
                return aid
        return None

    def pair_exists(self, *, session_id: int, student_code: str, exclude_id: Optional[int] = None) -> bool:
        found = self._find_pair(session_id, student_code)
        return found is not None and found != exclude_id

    def create(self, data: NewAttendanceRecord) -> int:
        aid = self._next_id
        self._next_id += 1
        self._rows[aid] = (data, self._clock.next())
        return aid

    def update(self, attendance_id: int, data: NewAttendanceRecord) -> bool:
        if int(attendance_id) not in self._rows:
            return False
        self._rows[int(attendance_id)] = (data, self._rows[int(attendance_id)][1])
        return True

    def upsert(self, data: NewAttendanceRecord):
        existing = self._find_pair(data.session_id, data.student_code)
        if existing is None:
            return self.create(data), True
        self.update(existing, data)
        return existing, False

    def count(self) -> int:
        return len(self._rows)


class InMemoryFaceData:
    def __init__(self, clock: _Clock):
        self._clock = clock
        self._rows: dict[int, FaceData] = {}
        self._next_id = 1

    def _newest_first(self, rows):
        return sorted(rows, key=lambda f: (f.created_date, f.face_data_id), reverse=True)

    def list_for_person(self, person_code: str):
        return self._newest_first(f for f in self._rows.values() if f.person_code == person_code)

    def get_by_id(self, face_data_id: int) -> Optional[FaceData]:
        return self._rows.get(int(face_data_id))

    def latest_descriptor(self, person_type, person_code: str) -> Optional[StoredDescriptor]:
        rows = self._newest_first(
            f for f in self._rows.values() if f.person_type is person_type and f.person_code == person_code
        )
        if not rows:
            return None
        return StoredDescriptor(face_data_id=rows[0].face_data_id, face_descriptor=rows[0].face_descriptor)

    def create(self, data: NewFaceData) -> int:
        fid = self._next_id
        self._next_id += 1
        self._rows[fid] = FaceData(
            face_data_id=fid,
            person_type=data.person_type,
            person_code=data.person_code,
            image_data=data.image_data,
            face_descriptor=data.face_descriptor,
            original_name=data.original_name,
            content_type=data.content_type,
            created_date=self._clock.next(),
        )
        return fid

    def update(self, face_data_id: int, data: NewFaceData) -> bool:
        current = self._rows.get(int(face_data_id))
        if not current:
            return False
        self._rows[current.face_data_id] = replace(
            current,
            person_type=data.person_type,
            person_code=data.person_code,
            image_data=data.image_data,
            face_descriptor=data.face_descriptor,
            original_name=data.original_name,
            content_type=data.content_type,
        )
        return True

    def delete_by_id(self, face_data_id: int) -> bool:
        return self._rows.pop(int(face_data_id), None) is not None


class Repos:
    def __init__(self):
        clock = _Clock()
        self.students = InMemoryStudents(clock)
        self.teachers = InMemoryTeachers(clock)
        self.subject_sets = InMemorySubjectSets(clock)
        self.classes = InMemoryClasses(clock, self.subject_sets, self.teachers, self.students)
        self.sessions = InMemorySessions(clock, self.subject_sets, self.teachers)
        self.attendance = InMemoryAttendance(clock, self.sessions, self.students)
        self.face_data = InMemoryFaceData(clock)



@pytest.fixture
def repos() -> Repos:
    return Repos()


@pytest.fixture
def container(repos):
    return wire(
        students_repo=repos.students,
        teachers_repo=repos.teachers,
        subject_sets_repo=repos.subject_sets,
        classes_repo=repos.classes,
        sessions_repo=repos.sessions,
        attendance_repo=repos.attendance,
        face_data_repo=repos.face_data,
    )


@pytest.fixture
def seeded(container):
    """One student, one teacher, one subject set and one session on the Main campus."""
    container.student_service.create_student(student_payload())
    container.teacher_service.create_teacher(teacher_payload())
    container.subject_set_service.create_subject_set(subject_set_payload())
    session = container.session_service.create_session(session_payload())
    return session


@pytest.fixture
def app(container, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    monkeypatch.setenv("AUTO_INIT_DB", "0")

    from edu_attendance.main import create_app

    return create_app(container=container)


@pytest.fixture
def client(app):
    return app.test_client()
