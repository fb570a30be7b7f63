import pytest

from edu_attendance.core.exceptions import BusinessRuleError, NotFoundError
from payloads import DESCRIPTOR, face_payload, student_payload, teacher_payload


def test_roster_is_sorted_by_name(container):
    container.teacher_service.create_teacher(teacher_payload(TeacherCode="T2", TeacherName="Zoe Zhang"))
    container.teacher_service.create_teacher(teacher_payload(TeacherCode="T1", TeacherName="Adam Ant"))

    roster = [t.to_summary() for t in container.auth_service.list_teachers()]

    assert [t["TeacherName"] for t in roster] == ["Adam Ant", "Zoe Zhang"]
    assert "TeacherImage" not in roster[0]


def test_verify_teacher_face_requires_both_fields(container):
    with pytest.raises(BusinessRuleError) as exc:
        container.auth_service.verify_teacher_face({"TeacherCode": "TCH001"})

    assert exc.value.message == "TeacherCode and FaceDescriptor are required"


def test_verify_teacher_face_without_registration(seeded, container):
    with pytest.raises(NotFoundError) as exc:
        container.auth_service.verify_teacher_face({"TeacherCode": "TCH001", "FaceDescriptor": "[0.1]"})

    assert exc.value.message == "No face data found for this teacher. Please register face first."


def test_verify_teacher_face_returns_latest_descriptor(seeded, container):
    faces = container.face_data_service
    faces.create_face_data(face_payload(PersonType="Teacher", PersonCode="TCH001", FaceDescriptor="[0.0]"))
    faces.create_face_data(face_payload(PersonType="Teacher", PersonCode="TCH001", FaceDescriptor=DESCRIPTOR))

    result = container.auth_service.verify_teacher_face({"TeacherCode": "TCH001", "FaceDescriptor": [0.1, 0.2]})
    body = result.to_dict()

    assert body["teacher"]["TeacherCode"] == "TCH001"
    assert body["storedFaceDescriptor"] == DESCRIPTOR
    assert body["providedFaceDescriptor"] == [0.1, 0.2]
    assert body["message"] == "Face descriptors retrieved for comparison"
    assert "sessionId" not in body


def test_verify_student_face_echoes_session(seeded, container):
    container.face_data_service.create_face_data(face_payload())

    body = container.auth_service.verify_student_face(
        {"StudentCode": "STU001", "FaceDescriptor": "[0.3]", "SessionId": seeded.session_id}
    ).to_dict()

    assert body["student"]["StudentName"] == "John Doe"
    assert body["sessionId"] == seeded.session_id
    assert body["message"] == "Student face descriptors retrieved for comparison"


def test_verify_student_face_without_registration(seeded, container):
    with pytest.raises(NotFoundError) as exc:
        container.auth_service.verify_student_face({"StudentCode": "STU001", "FaceDescriptor": "[0.3]"})

    assert exc.value.message == "No face data found for this student. Please register face first."


def test_teacher_classes_and_students(seeded, container):
    container.student_service.create_student(student_payload(StudentCode="STU002", StudentName="Amy Adams"))
    for code in ("STU001", "STU002"):
        container.class_service.create_class(
            {"Campus": "Main", "SubjectSetID": "MATH101", "TeacherCode": "TCH001", "StudentCode": code}
        )

    classes = container.auth_service.teacher_classes("TCH001")
    students = container.auth_service.class_students(teacher_code="TCH001", campus="Main", subject_set_id="MATH101")

    assert [(c.subject, c.student_count) for c in classes] == [("Algebra", 2)]
    assert [s.name for s in students] == ["Amy Adams", "John Doe"]
    assert container.auth_service.teacher_classes("TCH404") == []


def test_verify_paths_skip_image_columns(seeded, container, repos, monkeypatch):
    container.face_data_service.create_face_data(face_payload(PersonType="Teacher", PersonCode="TCH001"))
    container.face_data_service.create_face_data(face_payload())

    def full_row_lookup(*args, **kwargs):
        raise AssertionError("verification must not load image columns")

    monkeypatch.setattr(repos.teachers, "get_by_code", full_row_lookup)
    monkeypatch.setattr(repos.students, "get_by_code", full_row_lookup)
    monkeypatch.setattr(repos.face_data, "list_for_person", full_row_lookup)
    monkeypatch.setattr(repos.face_data, "get_by_id", full_row_lookup)

    teacher = container.auth_service.verify_teacher_face({"TeacherCode": "TCH001", "FaceDescriptor": "[0.1]"})
    student = container.auth_service.verify_student_face({"StudentCode": "STU001", "FaceDescriptor": "[0.1]"})

    assert teacher.to_dict()["storedFaceDescriptor"] == DESCRIPTOR
    assert student.to_dict()["student"]["StudentCode"] == "STU001"
