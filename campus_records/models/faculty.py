from sqlalchemy import Column, String

from campus_records.models.base import Base


class Faculty(Base):
    """
    Model for faculty records.

    Attributes:
        faculty_number (str): Primary key, assigned by the client
        faculty_name (str): Full name
        faculty_profile (str): Stored upload filename, or None
        joining_year (str): Year the faculty member joined
        birth_date (str): Date of birth as sent by the client
        department (str): Department name
        mobile (str): Mobile number
        faculty_email (str): Contact email
    """
    __tablename__ = "faculty"

    faculty_number = Column(String, primary_key=True)
    faculty_name = Column(String)
    faculty_profile = Column(String)
    joining_year = Column(String)
    birth_date = Column(String)
    department = Column(String)
    mobile = Column(String)
    faculty_email = Column(String)

    def __repr__(self):
        return f"<Faculty {self.faculty_number}>"
