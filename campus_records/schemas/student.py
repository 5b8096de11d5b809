"""
Pydantic models for student records.
"""

from typing import Any, Optional

from pydantic import BaseModel, ConfigDict, field_validator


class StudentBase(BaseModel):
    """Fields shared by every student payload"""
    model_config = ConfigDict(coerce_numbers_to_str=True, extra="ignore")

    name: Optional[str] = None
    birth_date: Optional[str] = None
    mobile: Optional[str] = None
    email: Optional[str] = None
    department: Optional[str] = None
    cgpa: Optional[float] = None

    @field_validator("cgpa", mode="before")
    @classmethod
    def blank_cgpa_is_null(cls, value: Any) -> Any:
        # Form posts send "" for an untouched numeric input
        if isinstance(value, str) and not value.strip():
            return None
        return value


class StudentCreate(StudentBase):
    """Model for creating a student record"""
    id: str


class StudentUpdate(StudentBase):
    """Model for updating a student record; the key comes from the path"""
    profile: Optional[str] = None


class StudentResponse(BaseModel):
    """Model for student responses"""
    model_config = ConfigDict(from_attributes=True)

    id: str
    name: Optional[str] = None
    profile: Optional[str] = None
    birth_date: Optional[str] = None
    mobile: Optional[str] = None
    email: Optional[str] = None
    department: Optional[str] = None
    cgpa: Optional[float] = None
