"""
Integration tests for the SQLite adapter and the record repositories.
"""

import pytest
from sqlalchemy import inspect

from campus_records.adapters.database.sqlite import SQLiteAdapter
from campus_records.exceptions import StoreError
from campus_records.repositories import FacultyRepository, StudentRepository


@pytest.mark.asyncio
async def test_init_creates_data_directory_and_tables(tmp_path):
    database_path = tmp_path / "nested" / "data" / "records.db"
    adapter = SQLiteAdapter(f"sqlite+aiosqlite:///{database_path}")
    await adapter.init()
    try:
        assert database_path.exists()
        async with adapter.engine.connect() as conn:
            tables = await conn.run_sync(lambda sync_conn: inspect(sync_conn).get_table_names())
        assert set(tables) == {"faculty", "students"}
    finally:
        await adapter.close()


@pytest.mark.asyncio
async def test_session_requires_init():
    adapter = SQLiteAdapter()
    with pytest.raises(RuntimeError):
        adapter.get_session()


@pytest.mark.asyncio
async def test_close_releases_engine(sqlite_adapter):
    await sqlite_adapter.close()
    assert sqlite_adapter.engine is None
    with pytest.raises(RuntimeError):
        sqlite_adapter.get_session()


@pytest.mark.asyncio
async def test_faculty_crud_operations(db_session, faculty_data):
    repository = FacultyRepository(db_session)

    assert await repository.get_all() == []

    await repository.create({**faculty_data, "faculty_profile": None})
    faculty = await repository.get_by_key("F100")
    assert faculty.faculty_name == "Ada Lovelace"
    assert faculty.faculty_profile is None

    assert await repository.update("F100", {"department": "Computing"}) is True
    await db_session.refresh(faculty)
    assert faculty.department == "Computing"
    assert faculty.faculty_email == "ada@example.edu"

    assert await repository.delete("F100") is True
    assert await repository.get_by_key("F100") is None


@pytest.mark.asyncio
async def test_missing_key_matches_no_rows(db_session):
    repository = StudentRepository(db_session)

    assert await repository.update("ghost", {"name": "Nobody"}) is False
    assert await repository.delete("ghost") is False


@pytest.mark.asyncio
async def test_duplicate_key_raises_store_error(db_session, student_data):
    repository = StudentRepository(db_session)
    await repository.create({**student_data, "cgpa": 8.5})

    with pytest.raises(StoreError) as exc_info:
        await repository.create({**student_data, "cgpa": 9.0})

    assert str(exc_info.value) == "Error inserting data"
    # The session stays usable after the rollback
    assert len(await repository.get_all()) == 1


@pytest.mark.asyncio
async def test_tables_are_independent(db_session, faculty_data, student_data):
    await FacultyRepository(db_session).create(faculty_data)
    await StudentRepository(db_session).create({**student_data, "id": "F100", "cgpa": 7.0})

    assert len(await FacultyRepository(db_session).get_all()) == 1
    assert len(await StudentRepository(db_session).get_all()) == 1
