"""
Shared pytest fixtures.

Every test gets its own SQLite database file, wired into the app by
overriding the ``get_db`` dependency. No PostgreSQL needed.
"""
import os
from typing import AsyncGenerator

# Must be set before the app (and its default engine) is imported
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy import event
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from main import app
from shared.config.database import Base, get_db


@pytest_asyncio.fixture
async def async_engine(tmp_path):
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'test.db'}")

    # SQLite ignores foreign keys unless asked
    @event.listens_for(engine.sync_engine, "connect")
    def _enable_foreign_keys(dbapi_connection, connection_record):
        cursor = dbapi_connection.cursor()
        cursor.execute("PRAGMA foreign_keys=ON")
        cursor.close()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def session_factory(async_engine) -> async_sessionmaker:
    return async_sessionmaker(async_engine, class_=AsyncSession, expire_on_commit=False)


@pytest_asyncio.fixture
async def db_session(session_factory) -> AsyncGenerator[AsyncSession, None]:
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def client(session_factory) -> AsyncGenerator[AsyncClient, None]:
    async def _get_test_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = _get_test_db
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


@pytest_asyncio.fixture
async def products(client):
    """Two catalogue entries, returned as the API's JSON bodies."""
    created = []
    for payload in (
        {"name": "MacBook Pro", "brand": "Apple", "price": 2000.0, "stockQuantity": 10},
        {"name": "Yonex Arcsaber 11 Pro", "brand": "Yonex", "price": 200.0, "stockQuantity": 5},
    ):
        resp = await client.post("/api/products", json=payload)
        assert resp.status_code == 201
        created.append(resp.json())
    return created
