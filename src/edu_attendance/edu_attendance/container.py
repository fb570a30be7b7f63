from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Mapping, Optional, Union

from .attendance.mysql_attendance_repository import MySQLAttendanceRepository
from .attendance.repository import AttendanceRepository
from .attendance.service import AttendanceService
from .auth.service import AuthService
from .classes.mysql_class_repository import MySQLClassRepository
from .classes.repository import ClassRepository
from .classes.service import ClassService
from .core.constants import DEFAULT_POOL_SIZE
from .database.connection import DBConfig, DatabaseConnection
from .face_data.mysql_face_data_repository import MySQLFaceDataRepository
from .face_data.repository import FaceDataRepository
from .face_data.service import FaceDataService
from .sessions.mysql_session_repository import MySQLSessionRepository
from .sessions.repository import SessionRepository
from .sessions.service import SessionService
from .students.mysql_student_repository import MySQLStudentRepository
from .students.repository import StudentRepository
from .students.service import StudentService
from .subject_sets.mysql_subject_set_repository import MySQLSubjectSetRepository
from .subject_sets.repository import SubjectSetRepository
from .subject_sets.service import SubjectSetService
from .teachers.mysql_teacher_repository import MySQLTeacherRepository
from .teachers.repository import TeacherRepository
from .teachers.service import TeacherService


@dataclass(frozen=True)
class Container:
    conn: Optional[DatabaseConnection]

    students_repo: StudentRepository
    teachers_repo: TeacherRepository
    subject_sets_repo: SubjectSetRepository
    classes_repo: ClassRepository
    sessions_repo: SessionRepository
    attendance_repo: AttendanceRepository
    face_data_repo: FaceDataRepository

    student_service: StudentService
    teacher_service: TeacherService
    subject_set_service: SubjectSetService
    class_service: ClassService
    session_service: SessionService
    attendance_service: AttendanceService
    face_data_service: FaceDataService
    auth_service: AuthService


def _to_db_config(db_config: Union[DBConfig, Mapping[str, Any]]) -> DBConfig:
    if isinstance(db_config, DBConfig):
        return db_config
    return DBConfig(
        host=str(db_config["host"]),
        port=int(db_config.get("port", 3306)),
        user=str(db_config["user"]),
        password=str(db_config["password"]),
        database=str(db_config["database"]),
        pool_size=int(db_config.get("pool_size", DEFAULT_POOL_SIZE)),
    )


def wire(
    *,
    students_repo: StudentRepository,
    teachers_repo: TeacherRepository,
    subject_sets_repo: SubjectSetRepository,
    classes_repo: ClassRepository,
    sessions_repo: SessionRepository,
    attendance_repo: AttendanceRepository,
    face_data_repo: FaceDataRepository,
    conn: Optional[DatabaseConnection] = None,
) -> Container:
    """Build every service on top of the given repositories."""
    return Container(
        conn=conn,
        students_repo=students_repo,
        teachers_repo=teachers_repo,
        subject_sets_repo=subject_sets_repo,
        classes_repo=classes_repo,
        sessions_repo=sessions_repo,
        attendance_repo=attendance_repo,
        face_data_repo=face_data_repo,
        student_service=StudentService(students_repo),
        teacher_service=TeacherService(teachers_repo),
        subject_set_service=SubjectSetService(subject_sets_repo),
        class_service=ClassService(classes_repo, subject_sets_repo, teachers_repo, students_repo),
        session_service=SessionService(sessions_repo, subject_sets_repo, teachers_repo),
        attendance_service=AttendanceService(attendance_repo, sessions_repo, students_repo),
        face_data_service=FaceDataService(face_data_repo, students_repo, teachers_repo),
        auth_service=AuthService(teachers_repo, students_repo, classes_repo, face_data_repo),
    )


def build_container(*, db_config: Union[DBConfig, Mapping[str, Any]]) -> Container:
    conn = DatabaseConnection(_to_db_config(db_config))

    return wire(
        conn=conn,
        students_repo=MySQLStudentRepository(conn),
        teachers_repo=MySQLTeacherRepository(conn),
        subject_sets_repo=MySQLSubjectSetRepository(conn),
        classes_repo=MySQLClassRepository(conn),
        sessions_repo=MySQLSessionRepository(conn),
        attendance_repo=MySQLAttendanceRepository(conn),
        face_data_repo=MySQLFaceDataRepository(conn),
    )
