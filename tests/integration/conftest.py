"""Integration-test fixtures.

API-flow tests use the root `client` fixture (in-memory store, fake Horizon).
Store round-trip tests need a real PostgreSQL: set TEST_DATABASE_URL to a
scratch database (postgresql+asyncpg://...). Tables are created from the ORM
metadata and dropped afterwards; without the variable those tests skip.
"""

import os

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from src.tv_common.database import Base
from src.tv_ledger.infrastructure import db_models  # noqa: F401  -- registers tables on Base

TEST_DATABASE_URL = os.environ.get("TEST_DATABASE_URL")


@pytest.fixture
async def pg_session() -> AsyncSession:
    """Function-scoped session over freshly created tables."""
    if not TEST_DATABASE_URL:
        pytest.skip("TEST_DATABASE_URL not set")

    engine = create_async_engine(TEST_DATABASE_URL)
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
        await conn.run_sync(Base.metadata.create_all)

    factory = async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()
