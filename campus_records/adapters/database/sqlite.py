"""
SQLite database adapter implementation.

Backs the records store with a single SQLite file accessed through
aiosqlite.
"""

import logging
from pathlib import Path
from typing import Optional

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import NullPool

from campus_records.adapters.database import DatabaseAdapter
from campus_records.models import Base

logger = logging.getLogger(__name__)


class SQLiteAdapter(DatabaseAdapter):
    """SQLite adapter implementation."""

    def __init__(self, database_url: Optional[str] = None, echo: bool = False):
        """Initialize the SQLite adapter.

        Args:
            database_url: Optional database URL. If not provided, uses in-memory SQLite.
            echo: Log every SQL statement through the sqlalchemy.engine logger
        """
        self.database_url = database_url or "sqlite+aiosqlite://"
        self.echo = echo
        self.engine: Optional[AsyncEngine] = None
        self.session_factory: Optional[async_sessionmaker] = None

    def _ensure_parent_dir(self) -> None:
        database = make_url(self.database_url).database
        if database and database != ":memory:":
            Path(database).parent.mkdir(parents=True, exist_ok=True)

    async def init(self) -> None:
        """Initialize the SQLite database connection and create tables."""
        try:
            self._ensure_parent_dir()

            self.engine = create_async_engine(
                self.database_url,
                connect_args={"check_same_thread": False},
                poolclass=NullPool,
                echo=self.echo
            )

            self.session_factory = async_sessionmaker(
                bind=self.engine,
                class_=AsyncSession,
                expire_on_commit=False
            )

            async with self.engine.begin() as conn:
                await conn.run_sync(Base.metadata.create_all)

            logger.info(f"Connected to SQLite database at {self.database_url}")
        except Exception as e:
            logger.error(f"Error opening database: {str(e)}")
            raise

    async def close(self) -> None:
        """Close the SQLite database connection."""
        if self.engine:
            await self.engine.dispose()
            self.engine = None
            self.session_factory = None
            logger.info("Closed SQLite database connection")

    def get_session(self) -> AsyncSession:
        """Get a SQLite database session.

        Returns:
            AsyncSession: A session object

        Raises:
            RuntimeError: If init() has not been awaited
        """
        if not self.session_factory:
            raise RuntimeError("Database not initialized. Call init() first.")
        return self.session_factory()
