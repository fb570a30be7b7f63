from pathlib import Path

from edu_attendance.database.bootstrap import _strip_comments, _strip_create_db_and_use, iter_sql_statements

SCHEMA = Path(__file__).resolve().parents[2] / "database" / "schema.sql"


def test_splitter_ignores_semicolons_in_quotes():
    sql = "INSERT INTO t VALUES ('a;b'); SELECT \"x;y\";\nSELECT 1"

    assert list(iter_sql_statements(sql)) == ["INSERT INTO t VALUES ('a;b')", 'SELECT "x;y"', "SELECT 1"]


def test_schema_file_is_database_agnostic():
    sql = _strip_comments(_strip_create_db_and_use(SCHEMA.read_text(encoding="utf-8")))
    statements = list(iter_sql_statements(sql))

    assert not any(s.upper().startswith(("CREATE DATABASE", "USE ")) for s in statements)
    tables = [s.split()[5] for s in statements if s.upper().startswith("CREATE TABLE IF NOT EXISTS")]
    assert tables == ["Student", "Teacher", "SubjectSet", "Class", "Sessions", "AttendanceRecords", "FaceData"]


def test_schema_declares_natural_keys():
    sql = SCHEMA.read_text(encoding="utf-8")

    assert "UNIQUE KEY uq_attendance_session_student (SessionId, StudentCode)" in sql
    assert "UNIQUE KEY uq_subject_set_campus (Campus, SubjectSetID)" in sql
    assert "CHECK (StartTime < EndTime)" in sql
