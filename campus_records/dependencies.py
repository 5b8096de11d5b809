"""
FastAPI dependencies shared by the record routers.
"""

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from campus_records.services.records import FacultyService, StudentService
from campus_records.utils.config import Settings
from campus_records.utils.database import get_db


def get_app_settings(request: Request) -> Settings:
    """Settings the running application was created with."""
    return request.app.state.settings


def get_faculty_service(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_app_settings)
) -> FacultyService:
    return FacultyService(db, settings.UPLOAD_DIR)


def get_student_service(
    db: AsyncSession = Depends(get_db),
    settings: Settings = Depends(get_app_settings)
) -> StudentService:
    return StudentService(db, settings.UPLOAD_DIR)
