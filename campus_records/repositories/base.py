"""
Base repository pattern implementation for database operations.

This module provides a generic repository that subclasses bind to a model
and its primary-key column. Driver failures are rolled back, logged, and
re-raised as ``StoreError`` with a generic message.
"""

import logging
from typing import Any, ClassVar, Dict, Generic, List, Optional, Type, TypeVar

from sqlalchemy import delete, insert, select, update
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from campus_records.exceptions import StoreError
from campus_records.models.base import Base

T = TypeVar('T', bound=Base)

logger = logging.getLogger(__name__)

FETCH_ERROR = "Error fetching data"
INSERT_ERROR = "Error inserting data"
UPDATE_ERROR = "Error updating data"
DELETE_ERROR = "Error deleting data"


class BaseRepository(Generic[T]):
    """
    Generic repository for single-table record operations.

    Attributes:
        db (AsyncSession): SQLAlchemy database session
        model (Type[T]): SQLAlchemy model class, set by subclasses
        key_field (str): Name of the primary-key column, set by subclasses
    """

    model: ClassVar[Type[Base]]
    key_field: ClassVar[str]

    def __init__(self, db: AsyncSession):
        self.db = db

    @property
    def key_column(self):
        return getattr(self.model, self.key_field)

    async def _fail(self, message: str, exc: SQLAlchemyError) -> StoreError:
        await self.db.rollback()
        logger.error(f"{message}: {str(exc)}")
        return StoreError(message)

    async def get_all(self) -> List[T]:
        """
        Get every row of the table.

        Returns:
            List[T]: Model instances, empty when the table has no rows
        """
        try:
            result = await self.db.execute(select(self.model))
            return list(result.scalars().all())
        except SQLAlchemyError as e:
            raise await self._fail(FETCH_ERROR, e) from e

    async def get_by_key(self, key: Any) -> Optional[T]:
        """
        Get a row by primary key.

        Returns:
            Optional[T]: Model instance if found, None otherwise
        """
        try:
            result = await self.db.execute(select(self.model).where(self.key_column == key))
            return result.scalar_one_or_none()
        except SQLAlchemyError as e:
            raise await self._fail(FETCH_ERROR, e) from e

    async def create(self, data: Dict[str, Any]) -> None:
        """
        Insert a new row.

        A duplicate key is reported like any other write failure.

        Args:
            data (Dict[str, Any]): Column values, primary key included
        """
        try:
            await self.db.execute(insert(self.model).values(**data))
            await self.db.commit()
        except SQLAlchemyError as e:
            raise await self._fail(INSERT_ERROR, e) from e

    async def update(self, key: Any, data: Dict[str, Any]) -> bool:
        """
        Overwrite columns of the row matching ``key``.

        Args:
            key (Any): Primary key value
            data (Dict[str, Any]): Column values to write; must not contain the key

        Returns:
            bool: True if a row matched, False otherwise
        """
        try:
            result = await self.db.execute(
                update(self.model).where(self.key_column == key).values(**data)
            )
            await self.db.commit()
            return result.rowcount > 0
        except SQLAlchemyError as e:
            raise await self._fail(UPDATE_ERROR, e) from e

    async def delete(self, key: Any) -> bool:
        """
        Delete the row matching ``key``.

        Returns:
            bool: True if deleted, False if not found
        """
        try:
            result = await self.db.execute(delete(self.model).where(self.key_column == key))
            await self.db.commit()
            return result.rowcount > 0
        except SQLAlchemyError as e:
            raise await self._fail(DELETE_ERROR, e) from e
