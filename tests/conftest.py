"""
Shared test fixtures for the employee API tests.
"""
import os

# Set test environment before importing app modules
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("ENVIRONMENT", "test")

from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from app.db import Base, get_db
from app.main import app
from app.models import EmployeeORM
from app.repository import EmployeeRepository


@pytest_asyncio.fixture
async def db_engine():
    """In-memory SQLite shared by every session of one test."""
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(db_engine):
    return async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def client(session_factory):
    """HTTP client against the app with get_db pointed at the test database."""
    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest.fixture
def employee_data():
    return {
        "firstName": "Ada",
        "lastName": "Lovelace",
        "location": "London",
        "email": "ada@x.com",
    }


@pytest.fixture
def mock_repository():
    """Repository double whose async methods can be primed per test."""
    repository = AsyncMock(spec=EmployeeRepository)
    repository.find_all = AsyncMock(return_value=[])
    repository.find_by_id = AsyncMock(return_value=None)
    repository.delete = AsyncMock(return_value=None)

    async def save(employee):
        if employee.id is None:
            employee.id = 1
        return employee

    repository.save = AsyncMock(side_effect=save)
    return repository


@pytest.fixture
def stored_employee():
    return EmployeeORM(
        id=7,
        first_name="Grace",
        last_name="Hopper",
        location="New York",
        email="grace@example.com",
    )
