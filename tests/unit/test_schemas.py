"""
Tests for request schemas.
"""

import pytest
from pydantic import ValidationError

from campus_records.schemas import FacultyCreate, FacultyUpdate, StudentCreate, StudentUpdate


def test_faculty_create_requires_key():
    with pytest.raises(ValidationError):
        FacultyCreate.model_validate({"faculty_name": "No Key"})


def test_numbers_are_accepted_for_text_fields():
    faculty = FacultyCreate.model_validate({"faculty_number": 7, "joining_year": 2015})
    assert faculty.faculty_number == "7"
    assert faculty.joining_year == "2015"


def test_create_ignores_profile_and_unknown_fields():
    faculty = FacultyCreate.model_validate({
        "faculty_number": "F1",
        "faculty_profile": "sneaky.png",
        "unexpected": "x",
    })
    assert "faculty_profile" not in faculty.model_dump()
    assert "unexpected" not in faculty.model_dump()


def test_cgpa_parsed_from_string():
    student = StudentCreate.model_validate({"id": "S1", "cgpa": "8.5"})
    assert student.cgpa == 8.5


def test_blank_cgpa_is_null():
    student = StudentCreate.model_validate({"id": "S1", "cgpa": "  "})
    assert student.cgpa is None


def test_invalid_cgpa_rejected():
    with pytest.raises(ValidationError):
        StudentCreate.model_validate({"id": "S1", "cgpa": "excellent"})


def test_update_fills_omitted_fields_with_none():
    update = StudentUpdate.model_validate({"name": "B", "profile": ""})
    assert update.model_dump() == {
        "name": "B",
        "birth_date": None,
        "mobile": None,
        "email": None,
        "department": None,
        "cgpa": None,
        "profile": "",
    }


def test_update_drops_key_from_body():
    update = FacultyUpdate.model_validate({"faculty_number": "OTHER", "department": "Physics"})
    data = update.model_dump()
    assert "faculty_number" not in data
    assert data["department"] == "Physics"
