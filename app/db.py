"""Database configuration for the employee service."""

from typing import AsyncIterator

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.orm import DeclarativeBase

from app.config import DATABASE_URL, DB_ECHO


class Base(DeclarativeBase):
    pass


engine = create_async_engine(DATABASE_URL, future=True, echo=DB_ECHO)

SessionLocal = async_sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False
)


async def get_db() -> AsyncIterator[AsyncSession]:
    """Yield one database session per request."""
    async with SessionLocal() as session:
        yield session


async def init_db():
    """Create tables for all registered models."""
    # Import all models to ensure they are registered
    from app.models import EmployeeORM  # noqa: F401

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
