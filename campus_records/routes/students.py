"""
Router for student endpoints.
"""

from typing import List

from fastapi import APIRouter, Depends, status

from campus_records.dependencies import get_student_service
from campus_records.schemas.student import StudentResponse
from campus_records.services.records import StudentService
from campus_records.utils.api_response import success_response
from campus_records.utils.forms import RecordPayload, record_payload

router = APIRouter(
    prefix="/api/students",
    tags=["students"]
)

read_student_payload = record_payload("profile")


@router.get("", response_model=List[StudentResponse])
async def list_students(service: StudentService = Depends(get_student_service)):
    return await service.list_records()


@router.get("/{id}", response_model=StudentResponse)
async def get_student(id: str, service: StudentService = Depends(get_student_service)):
    return await service.get_record(id)


@router.post("", status_code=status.HTTP_201_CREATED)
async def create_student(
    payload: RecordPayload = Depends(read_student_payload),
    service: StudentService = Depends(get_student_service)
):
    await service.create_record(payload.fields, payload.upload)
    return success_response(message="Student added successfully")


@router.put("/{id}")
async def update_student(
    id: str,
    payload: RecordPayload = Depends(read_student_payload),
    service: StudentService = Depends(get_student_service)
):
    await service.update_record(id, payload.fields, payload.upload)
    return success_response(message="Student updated successfully")


@router.delete("/{id}")
async def delete_student(id: str, service: StudentService = Depends(get_student_service)):
    await service.delete_record(id)
    return success_response(message="Student deleted successfully")
