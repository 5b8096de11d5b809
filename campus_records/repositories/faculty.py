from campus_records.models.faculty import Faculty
from campus_records.repositories.base import BaseRepository


class FacultyRepository(BaseRepository[Faculty]):
    """Repository for the ``faculty`` table, keyed by faculty number."""

    model = Faculty
    key_field = "faculty_number"
