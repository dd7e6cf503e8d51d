"""Student models: both backend shapes, request projections, import result."""

import pytest
from pydantic import ValidationError

from core.domain.students import (
    CreateStudentRequest,
    ImportResult,
    Student,
    StudentStatus,
    UpdateStudentRequest,
)


class TestStudent:
    def test_split_name_shape(self, student_payload):
        student = Student.model_validate(student_payload(gender="F", profession_id="p1"))
        assert student.display_name == "Ana Rojas"
        assert student.gender == "F"
        assert student.status is StudentStatus.ACTIVE

    def test_collapsed_name_shape(self, student_payload):
        data = student_payload(full_name="Ana María Rojas", country_origin_id="co")
        for key in ("first_names", "last_names", "nationality_country_id", "residence_country_id"):
            data.pop(key)
        student = Student.model_validate(data)
        assert student.display_name == "Ana María Rojas"
        assert student.country_origin_id == "co"

    def test_unknown_fields_are_kept(self, student_payload):
        student = Student.model_validate(student_payload(deleted_at=None, university_id="u1"))
        assert student.model_dump()["university_id"] == "u1"

    def test_unknown_status_is_rejected(self, student_payload):
        with pytest.raises(ValidationError):
            Student.model_validate(student_payload(status="expelled"))


def _create_kwargs(**overrides):
    data = {
        "birth_date": "2000-05-17",
        "emails": ["ana@example.com"],
        "status": "active",
        "cohort": "2024-1",
        "enrollment_date": "2024-02-01",
    }
    data.update(overrides)
    return data


class TestCreateStudentRequest:
    def test_split_shape_requires_both_names_and_countries(self):
        with pytest.raises(ValidationError, match="last_names"):
            CreateStudentRequest(**_create_kwargs(first_names="Ana", nationality_country_id="co", residence_country_id="co"))

    def test_collapsed_shape(self):
        request = CreateStudentRequest(**_create_kwargs(full_name="Ana Rojas", country_origin_id="co"))
        body = request.model_dump(mode="json", exclude_unset=True)
        assert body["full_name"] == "Ana Rojas"
        assert "first_names" not in body

    def test_collapsed_shape_requires_country(self):
        with pytest.raises(ValidationError, match="country_origin_id"):
            CreateStudentRequest(**_create_kwargs(full_name="Ana Rojas"))

    def test_formats_are_not_validated_locally(self):
        request = CreateStudentRequest(
            **_create_kwargs(
                first_names="A",
                last_names="B",
                nationality_country_id="not-a-uuid",
                residence_country_id="x",
                emails=["not-an-email"],
                status="whatever",
                birth_date="yesterday",
            )
        )
        assert request.status == "whatever"

    def test_enum_status_serializes_to_value(self):
        request = CreateStudentRequest(
            **_create_kwargs(full_name="Ana", country_origin_id="co", status=StudentStatus.SUSPENDED)
        )
        assert request.model_dump(mode="json")["status"] == "suspended"


def test_update_request_dumps_only_set_fields():
    request = UpdateStudentRequest(document_id=None, cohort_ignored=True, emails=["a@b.c"])
    assert request.model_dump(mode="json", exclude_unset=True) == {"document_id": None, "emails": ["a@b.c"]}


def test_import_result_keeps_unknown_fields():
    result = ImportResult.model_validate({"total_rows": 4, "created": 3, "errors": [], "skipped": 1})
    assert result.created == 3
    assert result.model_extra == {"skipped": 1}
