"""
Pytest fixtures for infrastructure tests.

Each test gets a fresh in-memory SQLite database (aiosqlite) with every
table created.
"""

import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from lanyard.infrastructure.persistence.sqlalchemy.models import Base


@pytest_asyncio.fixture
async def async_engine():
    """In-memory SQLite engine with all tables."""
    engine = create_async_engine("sqlite+aiosqlite:///:memory:", echo=False)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def session_maker(async_engine) -> async_sessionmaker[AsyncSession]:
    return async_sessionmaker(
        async_engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )


@pytest_asyncio.fixture
async def async_session(session_maker):
    """A session for one test; uncommitted changes are rolled back."""
    async with session_maker() as session:
        yield session
        await session.rollback()
