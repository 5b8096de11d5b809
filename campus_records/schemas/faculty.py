"""
Pydantic models for faculty records.
"""

from typing import Optional

from pydantic import BaseModel, ConfigDict


class FacultyBase(BaseModel):
    """Fields shared by every faculty payload"""
    model_config = ConfigDict(coerce_numbers_to_str=True, extra="ignore")

    faculty_name: Optional[str] = None
    joining_year: Optional[str] = None
    birth_date: Optional[str] = None
    department: Optional[str] = None
    mobile: Optional[str] = None
    faculty_email: Optional[str] = None


class FacultyCreate(FacultyBase):
    """Model for creating a faculty record"""
    faculty_number: str


class FacultyUpdate(FacultyBase):
    """Model for updating a faculty record; the key comes from the path"""
    faculty_profile: Optional[str] = None


class FacultyResponse(BaseModel):
    """Model for faculty responses"""
    model_config = ConfigDict(from_attributes=True)

    faculty_number: str
    faculty_name: Optional[str] = None
    faculty_profile: Optional[str] = None
    joining_year: Optional[str] = None
    birth_date: Optional[str] = None
    department: Optional[str] = None
    mobile: Optional[str] = None
    faculty_email: Optional[str] = None
