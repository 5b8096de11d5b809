from sqlalchemy import Column, Float, String

from campus_records.models.base import Base


class Student(Base):
    """
    Model for student records.

    ``profile`` holds the stored upload filename, never file content.
    """
    __tablename__ = "students"

    id = Column(String, primary_key=True)
    name = Column(String)
    profile = Column(String)
    birth_date = Column(String)
    mobile = Column(String)
    email = Column(String)
    department = Column(String)
    cgpa = Column(Float)

    def __repr__(self):
        return f"<Student {self.id}>"
