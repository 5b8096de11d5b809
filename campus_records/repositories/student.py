from campus_records.models.student import Student
from campus_records.repositories.base import BaseRepository


class StudentRepository(BaseRepository[Student]):
    """Repository for the ``students`` table."""

    model = Student
    key_field = "id"
