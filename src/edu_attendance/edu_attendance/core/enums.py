from __future__ import annotations

from enum import Enum


class AttendanceStatus(str, Enum):
    """Attendance status values stored in AttendanceRecords.Status."""

    PRESENT = "Present"
    ABSENT = "Absent"
    LATE = "Late"


class PersonType(str, Enum):
    """Owner kind of a FaceData row (matches the FaceData.PersonType ENUM)."""

    STUDENT = "Student"
    TEACHER = "Teacher"
