"""
This package contains repository implementations for database operations.

Repositories keep SQL out of the service layer: each public method maps to
exactly one parameterised statement against one table.
"""

from campus_records.repositories.faculty import FacultyRepository
from campus_records.repositories.student import StudentRepository

__all__ = ["FacultyRepository", "StudentRepository"]
