"""
Service for managing faculty and student records.

This module handles the logic for:
- Listing and fetching records
- Creating records, storing an uploaded profile file when present
- Updating records, merging the profile column from upload or body
- Deleting records
"""

import logging
from pathlib import Path
from typing import Any, ClassVar, Dict, List, Optional, Type, Union

from fastapi.exceptions import RequestValidationError
from pydantic import BaseModel, ValidationError
from sqlalchemy.ext.asyncio import AsyncSession
from starlette.datastructures import UploadFile

from campus_records.exceptions import RecordNotFoundError
from campus_records.models.base import Base
from campus_records.repositories.base import BaseRepository
from campus_records.repositories.faculty import FacultyRepository
from campus_records.repositories.student import StudentRepository
from campus_records.schemas.faculty import FacultyCreate, FacultyUpdate
from campus_records.schemas.student import StudentCreate, StudentUpdate
from campus_records.services.uploads import store_upload

logger = logging.getLogger(__name__)


class RecordService:
    """Record operations for one entity type.

    Subclasses name the repository, schemas, label and profile column.
    """

    label: ClassVar[str]
    profile_field: ClassVar[str]
    repository_class: ClassVar[Type[BaseRepository]]
    create_schema: ClassVar[Type[BaseModel]]
    update_schema: ClassVar[Type[BaseModel]]

    def __init__(self, db_session: AsyncSession, upload_dir: Union[str, Path]):
        """Initialize the service.

        Args:
            db_session: The database session
            upload_dir: Directory receiving profile uploads
        """
        self.repository = self.repository_class(db_session)
        self.upload_dir = upload_dir

    @property
    def not_found_message(self) -> str:
        return f"{self.label} not found"

    def _validate(self, schema: Type[BaseModel], fields: Dict[str, Any]) -> BaseModel:
        try:
            return schema.model_validate(fields)
        except ValidationError as e:
            raise RequestValidationError(e.errors(include_url=False, include_context=False))

    async def list_records(self) -> List[Base]:
        return await self.repository.get_all()

    async def get_record(self, key: str) -> Base:
        """
        Get one record by key.

        Raises:
            RecordNotFoundError: If no record has this key
        """
        record = await self.repository.get_by_key(key)
        if record is None:
            raise RecordNotFoundError(self.not_found_message)
        return record

    async def create_record(self, fields: Dict[str, Any], upload: Optional[UploadFile] = None) -> None:
        """
        Create a record.

        The profile column holds the generated upload name, or None when no
        file was sent. A profile value in ``fields`` is ignored.

        Raises:
            RequestValidationError: If the fields do not match the create schema
            StoreError: If the insert fails, including a duplicate key
        """
        payload = self._validate(self.create_schema, fields)
        data = payload.model_dump()
        data[self.profile_field] = await store_upload(upload, self.upload_dir) if upload else None

        await self.repository.create(data)
        logger.info(f"{self.label} {data[self.repository.key_field]} added")

    async def update_record(self, key: str, fields: Dict[str, Any], upload: Optional[UploadFile] = None) -> None:
        """
        Update the record with this key.

        Every non-key column is overwritten; fields missing from ``fields``
        become null. The profile column takes the new upload's name if a file
        was sent, otherwise whatever the body carries for it, so a client that
        does not echo the previous filename clears it.

        Raises:
            RecordNotFoundError: If no record has this key
            StoreError: If the update fails
        """
        payload = self._validate(self.update_schema, fields)
        data = payload.model_dump()
        if upload:
            data[self.profile_field] = await store_upload(upload, self.upload_dir)

        if not await self.repository.update(key, data):
            raise RecordNotFoundError(self.not_found_message)
        logger.info(f"{self.label} {key} updated")

    async def delete_record(self, key: str) -> None:
        """
        Delete the record with this key. Its uploaded file stays on disk.

        Raises:
            RecordNotFoundError: If no record has this key
        """
        if not await self.repository.delete(key):
            raise RecordNotFoundError(self.not_found_message)
        logger.info(f"{self.label} {key} deleted")


class FacultyService(RecordService):
    """Service for faculty records."""

    label = "Faculty"
    profile_field = "faculty_profile"
    repository_class = FacultyRepository
    create_schema = FacultyCreate
    update_schema = FacultyUpdate


class StudentService(RecordService):
    """Service for student records."""

    label = "Student"
    profile_field = "profile"
    repository_class = StudentRepository
    create_schema = StudentCreate
    update_schema = StudentUpdate
