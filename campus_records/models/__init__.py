"""
SQLAlchemy models for the records database.

Importing this package registers both tables on ``Base.metadata``.
"""

from campus_records.models.base import Base
from campus_records.models.faculty import Faculty
from campus_records.models.student import Student

__all__ = ["Base", "Faculty", "Student"]
