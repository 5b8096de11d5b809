"""
Pytest configuration and fixtures for testing.

Every test gets its own SQLite file and upload directory under tmp_path.
"""

import pytest
import pytest_asyncio
from fastapi import FastAPI
from fastapi.testclient import TestClient

from campus_records.adapters.database.sqlite import SQLiteAdapter
from campus_records.main import create_app
from campus_records.utils.config import Settings


@pytest.fixture
def test_settings(tmp_path) -> Settings:
    """Settings pointing storage at the test's temporary directory."""
    return Settings(
        _env_file=None,
        DATABASE_PATH=str(tmp_path / "data" / "test.db"),
        UPLOAD_DIR=str(tmp_path / "uploads"),
        LOG_DIR="",
    )


@pytest.fixture
def test_app(test_settings) -> FastAPI:
    """Create a new test application instance."""
    return create_app(test_settings)


@pytest.fixture
def client(test_app):
    """Test client with the application lifespan running."""
    with TestClient(test_app) as client:
        yield client


@pytest_asyncio.fixture
async def sqlite_adapter(tmp_path):
    """Initialized adapter over a fresh database file."""
    adapter = SQLiteAdapter(f"sqlite+aiosqlite:///{tmp_path / 'records.db'}")
    await adapter.init()
    yield adapter
    await adapter.close()


@pytest_asyncio.fixture
async def db_session(sqlite_adapter):
    """Create a fresh database session for a test."""
    async with sqlite_adapter.get_session() as session:
        yield session


@pytest.fixture
def faculty_data():
    return {
        "faculty_number": "F100",
        "faculty_name": "Ada Lovelace",
        "joining_year": "2015",
        "birth_date": "1980-12-10",
        "department": "Mathematics",
        "mobile": "5550100",
        "faculty_email": "ada@example.edu",
    }


@pytest.fixture
def student_data():
    return {
        "id": "S1",
        "name": "A",
        "birth_date": "2000-01-01",
        "mobile": "123",
        "email": "a@x.com",
        "department": "CS",
        "cgpa": "8.5",
    }
