"""
Database lifecycle and session management.

This module provides:
- Startup and shutdown helpers for the application's database adapter
- The FastAPI dependency that hands a session to each request

The adapter lives on ``app.state`` for the lifetime of the process.
"""

import logging
from typing import AsyncGenerator

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession

from campus_records.adapters.database import DatabaseAdapter
from campus_records.adapters.database.sqlite import SQLiteAdapter
from campus_records.utils.config import Settings

logger = logging.getLogger(__name__)


async def init_db(settings: Settings) -> DatabaseAdapter:
    """Create and initialize the database adapter.

    This function should be called during application startup.
    """
    logger.info(f"Opening records database at {settings.DATABASE_PATH}")
    adapter = SQLiteAdapter(settings.database_url, echo=settings.DEBUG)
    await adapter.init()
    return adapter


async def close_db(adapter: DatabaseAdapter) -> None:
    """Close the database adapter.

    This function should be called during application shutdown.
    """
    try:
        await adapter.close()
    except Exception as e:
        logger.error(f"Error closing database connection: {str(e)}")
        raise


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """Get a database session.

    This is a FastAPI dependency that provides a database session
    for route handlers.

    Yields:
        AsyncSession: A database session
    """
    adapter: DatabaseAdapter = request.app.state.db
    async with adapter.get_session() as session:
        yield session
