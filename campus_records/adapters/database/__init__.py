"""
Database adapter interface.

An adapter owns the engine and session factory for one database. The
application creates exactly one at startup and closes it on shutdown.
"""

from abc import ABC, abstractmethod

from sqlalchemy.ext.asyncio import AsyncSession


class DatabaseAdapter(ABC):
    """Abstract base class for database adapters."""

    @abstractmethod
    async def init(self) -> None:
        """Initialize the database connection and create tables."""
        pass

    @abstractmethod
    async def close(self) -> None:
        """Close the database connection."""
        pass

    @abstractmethod
    def get_session(self) -> AsyncSession:
        """Get a database session.

        Returns:
            AsyncSession: A new database session
        """
        pass
