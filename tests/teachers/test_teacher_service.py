import pytest

from edu_attendance.core.exceptions import BusinessRuleError, NotFoundError
from payloads import FACE_IMAGE_B64, teacher_payload


def test_create_and_get_teacher(container):
    svc = container.teacher_service
    created = svc.create_teacher(teacher_payload(TeacherImage=FACE_IMAGE_B64))

    fetched = svc.get_teacher(created.teacher_id)

    assert fetched.department == "Mathematics"
    assert fetched.image == b"face-image"
    assert fetched.to_dict()["TeacherCode"] == "TCH001"


def test_duplicate_teacher_code(container):
    svc = container.teacher_service
    svc.create_teacher(teacher_payload())

    with pytest.raises(BusinessRuleError) as exc:
        svc.create_teacher(teacher_payload(TeacherName="Someone Else"))

    assert exc.value.message == "Teacher code already exists"
    assert [t.name for t in svc.list_teachers()] == ["Karen Smith"]


def test_update_teacher_keeps_own_code_and_clears_image(container):
    svc = container.teacher_service
    created = svc.create_teacher(teacher_payload(TeacherImage=FACE_IMAGE_B64))

    updated = svc.update_teacher(created.teacher_id, teacher_payload(Department="Physics"))

    assert updated.teacher_code == "TCH001"
    assert updated.department == "Physics"
    assert updated.image is None


def test_update_teacher_rejects_code_taken_by_another(container):
    svc = container.teacher_service
    svc.create_teacher(teacher_payload())
    other = svc.create_teacher(teacher_payload(TeacherCode="TCH002", TeacherName="Bob Brown"))

    with pytest.raises(BusinessRuleError) as exc:
        svc.update_teacher(other.teacher_id, teacher_payload(TeacherCode="TCH001"))

    assert exc.value.message == "Teacher code already exists"
    assert svc.get_teacher(other.teacher_id) == other


def test_update_missing_teacher(container):
    with pytest.raises(NotFoundError) as exc:
        container.teacher_service.update_teacher(9, teacher_payload())

    assert exc.value.message == "Teacher not found"


def test_delete_teacher(container):
    svc = container.teacher_service
    created = svc.create_teacher(teacher_payload())

    svc.delete_teacher(created.teacher_id)

    assert svc.list_teachers() == []
    with pytest.raises(NotFoundError) as exc:
        svc.delete_teacher(created.teacher_id)
    assert exc.value.message == "Teacher not found"
