from datetime import date

from edu_attendance.attendance.model import NewAttendanceRecord
from edu_attendance.attendance.mysql_attendance_repository import MySQLAttendanceRepository
from edu_attendance.core.enums import AttendanceStatus


class FakeCursor:
    def __init__(self, rowcount, lastrowid=0, row=None):
        self.rowcount = rowcount
        self.lastrowid = lastrowid
        self._row = row
        self.statements = []

    def execute(self, sql, params=None):
        self.statements.append((sql, params))

    def fetchone(self):
        return self._row

    def close(self):
        pass


class FakeConnection:
    def __init__(self, cursor):
        self._cursor = cursor
        self.committed = False

    def cursor(self, dictionary=False):
        return self._cursor

    def commit(self):
        self.committed = True

    def rollback(self):
        pass

    def close(self):
        pass


class FakeConnectionFactory:
    def __init__(self, cursor):
        self.connection = FakeConnection(cursor)

    def connect(self):
        return self.connection


def _record():
    return NewAttendanceRecord(
        session_id=1,
        student_code="STU001",
        status=AttendanceStatus.LATE,
        attendance_date=date(2024, 5, 6),
    )


def test_upsert_uses_row_alias_instead_of_values_function():
    cur = FakeCursor(rowcount=1, lastrowid=7)
    repo = MySQLAttendanceRepository(FakeConnectionFactory(cur))

    repo.upsert(_record())

    sql, params = cur.statements[0]
    assert "AS new" in sql
    assert "Status=new.Status" in sql
    assert "VALUES(Status)" not in sql
    assert params == (1, "STU001", "Late", date(2024, 5, 6))


def test_upsert_insert_returns_new_id():
    cur = FakeCursor(rowcount=1, lastrowid=7)
    factory = FakeConnectionFactory(cur)

    assert MySQLAttendanceRepository(factory).upsert(_record()) == (7, True)
    assert len(cur.statements) == 1
    assert factory.connection.committed


def test_upsert_update_looks_up_existing_id():
    cur = FakeCursor(rowcount=2, row={"Id": 3})

    assert MySQLAttendanceRepository(FakeConnectionFactory(cur)).upsert(_record()) == (3, False)
    assert cur.statements[1][0].startswith("SELECT Id FROM AttendanceRecords")
    assert cur.statements[1][1] == (1, "STU001")
