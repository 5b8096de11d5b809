"""
Pydantic schemas for request validation and response serialization.
"""

from campus_records.schemas.faculty import FacultyCreate, FacultyResponse, FacultyUpdate
from campus_records.schemas.student import StudentCreate, StudentResponse, StudentUpdate

__all__ = [
    "FacultyCreate",
    "FacultyUpdate",
    "FacultyResponse",
    "StudentCreate",
    "StudentUpdate",
    "StudentResponse",
]
