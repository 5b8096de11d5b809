"""
Router for faculty endpoints.

- GET    /api/faculties
- GET    /api/faculties/{faculty_number}
- POST   /api/faculties          (optional ``faculty_profile`` file)
- PUT    /api/faculties/{faculty_number}
- DELETE /api/faculties/{faculty_number}
"""

from typing import List

from fastapi import APIRouter, Depends, status

from campus_records.dependencies import get_faculty_service
from campus_records.schemas.faculty import FacultyResponse
from campus_records.services.records import FacultyService
from campus_records.utils.api_response import success_response
from campus_records.utils.forms import RecordPayload, record_payload

router = APIRouter(
    prefix="/api/faculties",
    tags=["faculties"]
)

read_faculty_payload = record_payload("faculty_profile")


@router.get("", response_model=List[FacultyResponse])
async def list_faculties(service: FacultyService = Depends(get_faculty_service)):
    """Get all faculties"""
    return await service.list_records()


@router.get("/{faculty_number}", response_model=FacultyResponse)
async def get_faculty(faculty_number: str, service: FacultyService = Depends(get_faculty_service)):
    """Get a single faculty by faculty number"""
    return await service.get_record(faculty_number)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_faculty(
    payload: RecordPayload = Depends(read_faculty_payload),
    service: FacultyService = Depends(get_faculty_service)
):
    """Add a new faculty"""
    await service.create_record(payload.fields, payload.upload)
    return success_response(message="Faculty added successfully")


@router.put("/{faculty_number}")
async def update_faculty(
    faculty_number: str,
    payload: RecordPayload = Depends(read_faculty_payload),
    service: FacultyService = Depends(get_faculty_service)
):
    """Update an existing faculty"""
    await service.update_record(faculty_number, payload.fields, payload.upload)
    return success_response(message="Faculty updated successfully")


@router.delete("/{faculty_number}")
async def delete_faculty(faculty_number: str, service: FacultyService = Depends(get_faculty_service)):
    """Delete a faculty"""
    await service.delete_record(faculty_number)
    return success_response(message="Faculty deleted successfully")
