from __future__ import annotations

import base64
import binascii
import json
import math
import re
from typing import Any, Iterable, List, Mapping

from ..core import constants as c
from ..core.enums import AttendanceStatus, PersonType
from ..core.exceptions import ValidationError
from .datetime_utils import parse_clock_time, parse_iso_date

EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")


def is_blank(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return False


def is_valid_email(value: str) -> bool:
    return bool(EMAIL_RE.match(value))


def is_base64(value: Any) -> bool:
    """True only for canonical base64 (decodes and re-encodes to the same text)."""
    if not isinstance(value, str):
        return False
    try:
        decoded = base64.b64decode(value, validate=True)
    except (binascii.Error, ValueError):
        return False
    return base64.b64encode(decoded).decode("ascii") == value


def is_json(value: Any) -> bool:
    if not isinstance(value, str):
        return False
    try:
        json.loads(value)
    except ValueError:
        return False
    return True


def is_number(value: Any) -> bool:
    """Finite int, float or numeric string; NaN and infinities are rejected."""
    if isinstance(value, bool):
        return False
    if not isinstance(value, (int, float, str)):
        return False
    try:
        number = float(value.strip()) if isinstance(value, str) else float(value)
    except (ValueError, OverflowError):
        return False
    return math.isfinite(number)


def is_positive_int(value: Any) -> bool:
    if isinstance(value, bool):
        return False
    if isinstance(value, int):
        return value > 0
    if isinstance(value, str) and value.strip().isdecimal():
        return int(value) > 0
    return False


def _is_iso_date(value: Any) -> bool:
    try:
        parse_iso_date(str(value))
    except ValueError:
        return False
    return True


def _is_clock_time(value: Any) -> bool:
    try:
        parse_clock_time(str(value))
    except ValueError:
        return False
    return True


def _require(payload: Mapping[str, Any], fields: Iterable[str], errors: List[str]) -> None:
    for field in fields:
        if is_blank(payload.get(field)):
            errors.append(f"{field} is required")


def _max_length(payload: Mapping[str, Any], field: str, limit: int, errors: List[str]) -> None:
    value = payload.get(field)
    if value is not None and len(str(value)) > limit:
        errors.append(f"{field} must be {limit} characters or less")


def _email(payload: Mapping[str, Any], errors: List[str]) -> None:
    value = payload.get("EmailAddress")
    if not is_blank(value) and not is_valid_email(str(value)):
        errors.append("Invalid email format")


def _optional_base64(payload: Mapping[str, Any], field: str, errors: List[str]) -> None:
    value = payload.get(field)
    if not is_blank(value) and not is_base64(value):
        errors.append(f"{field} must be valid base64 encoded string")


def ensure_valid(errors: List[str]) -> None:
    if errors:
        raise ValidationError(errors)


def validate_student(payload: Mapping[str, Any]) -> List[str]:
    errors: List[str] = []
    _require(
        payload,
        ("StudentCode", "StudentNickname", "StudentName", "EmailAddress", "Campus", "Form"),
        errors,
    )
    _email(payload, errors)
    _max_length(payload, "StudentCode", c.MAX_CODE_LENGTH, errors)
    _max_length(payload, "StudentNickname", c.MAX_NICKNAME_LENGTH, errors)
    _max_length(payload, "StudentName", c.MAX_NAME_LENGTH, errors)
    _max_length(payload, "EmailAddress", c.MAX_EMAIL_LENGTH, errors)
    _max_length(payload, "Campus", c.MAX_CAMPUS_LENGTH, errors)
    _max_length(payload, "Form", c.MAX_FORM_LENGTH, errors)
    _optional_base64(payload, "StudentImage", errors)
    return errors


def validate_teacher(payload: Mapping[str, Any]) -> List[str]:
    errors: List[str] = []
    _require(
        payload,
        ("TeacherCode", "TeacherNickname", "TeacherName", "EmailAddress", "Campus", "Department"),
        errors,
    )
    _email(payload, errors)
    _max_length(payload, "TeacherCode", c.MAX_CODE_LENGTH, errors)
    _max_length(payload, "TeacherNickname", c.MAX_NICKNAME_LENGTH, errors)
    _max_length(payload, "TeacherName", c.MAX_NAME_LENGTH, errors)
    _max_length(payload, "EmailAddress", c.MAX_EMAIL_LENGTH, errors)
    _max_length(payload, "Campus", c.MAX_CAMPUS_LENGTH, errors)
    _max_length(payload, "Department", c.MAX_DEPARTMENT_LENGTH, errors)
    _optional_base64(payload, "TeacherImage", errors)
    return errors


def validate_subject_set(payload: Mapping[str, Any]) -> List[str]:
    errors: List[str] = []
    _require(payload, ("Campus", "SubjectSetID", "Subject"), errors)

    # Credits may legitimately be 0, so only None counts as missing.
    credits = payload.get("Credits")
    if credits is None:
        errors.append("Credits is required")
    elif not is_number(credits):
        errors.append("Credits must be a number")
    elif abs(float(credits)) >= c.MAX_CREDITS:
        errors.append(f"Credits must be less than {c.MAX_CREDITS}")

    _max_length(payload, "Campus", c.MAX_CAMPUS_LENGTH, errors)
    _max_length(payload, "SubjectSetID", c.MAX_SUBJECT_SET_ID_LENGTH, errors)
    _max_length(payload, "Subject", c.MAX_SUBJECT_LENGTH, errors)
    return errors


def validate_class(payload: Mapping[str, Any]) -> List[str]:
    errors: List[str] = []
    _require(payload, ("Campus", "SubjectSetID", "TeacherCode", "StudentCode"), errors)
    _max_length(payload, "Campus", c.MAX_CAMPUS_LENGTH, errors)
    _max_length(payload, "SubjectSetID", c.MAX_SUBJECT_SET_ID_LENGTH, errors)
    _max_length(payload, "TeacherCode", c.MAX_CODE_LENGTH, errors)
    _max_length(payload, "StudentCode", c.MAX_CODE_LENGTH, errors)
    return errors


def validate_session(payload: Mapping[str, Any]) -> List[str]:
    errors: List[str] = []
    _require(
        payload,
        ("SessionName", "SubjectSetID", "TeacherCode", "Campus", "SessionDate", "StartTime", "EndTime"),
        errors,
    )
    if not is_blank(payload.get("SessionDate")) and not _is_iso_date(payload["SessionDate"]):
        errors.append("SessionDate must be a valid date (YYYY-MM-DD)")
    for field in ("StartTime", "EndTime"):
        if not is_blank(payload.get(field)) and not _is_clock_time(payload[field]):
            errors.append(f"{field} must be a valid time (HH:MM)")

    _max_length(payload, "SessionName", c.MAX_SESSION_NAME_LENGTH, errors)
    _max_length(payload, "SubjectSetID", c.MAX_SUBJECT_SET_ID_LENGTH, errors)
    _max_length(payload, "TeacherCode", c.MAX_CODE_LENGTH, errors)
    _max_length(payload, "Campus", c.MAX_CAMPUS_LENGTH, errors)
    return errors


def _status(payload: Mapping[str, Any], errors: List[str]) -> None:
    status = payload.get("Status")
    if not is_blank(status) and status not in [s.value for s in AttendanceStatus]:
        errors.append("Status must be one of: Present, Absent, Late")


def validate_attendance(payload: Mapping[str, Any]) -> List[str]:
    errors: List[str] = []
    _require(payload, ("SessionId", "StudentCode", "Status", "AttendanceDate"), errors)
    _status(payload, errors)
    if not is_blank(payload.get("SessionId")) and not is_positive_int(payload["SessionId"]):
        errors.append("SessionId must be a positive integer")
    if not is_blank(payload.get("AttendanceDate")) and not _is_iso_date(payload["AttendanceDate"]):
        errors.append("AttendanceDate must be a valid date (YYYY-MM-DD)")
    _max_length(payload, "StudentCode", c.MAX_CODE_LENGTH, errors)
    return errors


def validate_mark_attendance(payload: Mapping[str, Any]) -> List[str]:
    """Lighter shape used by the face-verified marking flow (Status/date default)."""
    errors: List[str] = []
    _status(payload, errors)
    if not is_blank(payload.get("SessionId")) and not is_positive_int(payload["SessionId"]):
        errors.append("SessionId must be a positive integer")
    if not is_blank(payload.get("AttendanceDate")) and not _is_iso_date(payload["AttendanceDate"]):
        errors.append("AttendanceDate must be a valid date (YYYY-MM-DD)")
    _max_length(payload, "StudentCode", c.MAX_CODE_LENGTH, errors)
    return errors


def validate_face_data(payload: Mapping[str, Any]) -> List[str]:
    errors: List[str] = []
    _require(payload, ("PersonType", "PersonCode", "ImageData"), errors)

    person_type = payload.get("PersonType")
    if not is_blank(person_type) and person_type not in [p.value for p in PersonType]:
        errors.append('PersonType must be either "Student" or "Teacher"')

    _max_length(payload, "PersonCode", c.MAX_CODE_LENGTH, errors)
    _max_length(payload, "OriginalName", c.MAX_ORIGINAL_NAME_LENGTH, errors)
    _max_length(payload, "ContentType", c.MAX_CONTENT_TYPE_LENGTH, errors)

    image = payload.get("ImageData")
    if not is_blank(image) and not is_base64(image):
        errors.append("ImageData must be valid base64 encoded string")

    descriptor = payload.get("FaceDescriptor")
    if not is_blank(descriptor) and not is_json(descriptor):
        errors.append("FaceDescriptor must be valid JSON format")
    return errors
