# ruff: noqa: E402
# IMPORTANT:
# Environment variables must be set before importing app modules:
# core.config builds the global settings at import time.

from collections.abc import AsyncGenerator
import os

from asgi_lifespan import LifespanManager
from httpx import ASGITransport, AsyncClient
import pytest
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncEngine, create_async_engine
from sqlalchemy.pool import NullPool


def _setup_test_environment() -> str | None:
    """Set test defaults and return the external database URL, if any."""
    try:
        from dotenv import load_dotenv

        load_dotenv(".env.test", override=False)
    except ImportError:
        pass  # dotenv is optional

    os.environ.setdefault("ENVIRONMENT", "development")
    os.environ.setdefault("LOG_LEVEL", "DEBUG")

    # PostgreSQL when provided, otherwise every test gets its own SQLite file
    raw = os.getenv("TEST_DATABASE_URL")
    if not raw:
        return None
    from core.config import to_async_dsn

    return to_async_dsn(raw)


TEST_DATABASE_URL = _setup_test_environment()

# isort: off
from app import create_app
from db.schema import ensure_schema

# isort: on


def _database_url(tmp_path) -> str:
    if TEST_DATABASE_URL:
        return TEST_DATABASE_URL
    return f"sqlite+aiosqlite:///{tmp_path / 'miniblog_test.sqlite3'}"


@pytest.fixture(scope="function")
async def engine(tmp_path) -> AsyncGenerator[AsyncEngine]:
    """Engine with a freshly provisioned posts table, emptied after the test."""
    url = _database_url(tmp_path)
    eng = create_async_engine(url, poolclass=NullPool)
    result = await ensure_schema(eng)
    result.raise_for_error()
    try:
        yield eng
    finally:
        if not url.startswith("sqlite"):
            async with eng.begin() as conn:
                await conn.execute(text("TRUNCATE TABLE posts RESTART IDENTITY"))
        await eng.dispose()


@pytest.fixture(scope="function")
async def broken_engine(tmp_path) -> AsyncGenerator[AsyncEngine]:
    """Engine whose every connection attempt fails."""
    eng = create_async_engine(
        f"sqlite+aiosqlite:///{tmp_path / 'missing' / 'nowhere.sqlite3'}",
        poolclass=NullPool,
    )
    yield eng
    await eng.dispose()


@pytest.fixture(scope="function")
def app(engine: AsyncEngine):
    return create_app(engine)


@pytest.fixture(scope="function")
async def client(app) -> AsyncGenerator[AsyncClient]:
    """Async HTTP client with app lifespan management for integration tests."""
    async with LifespanManager(app):
        async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as ac:
            yield ac


@pytest.fixture(scope="function")
async def unit_client(app) -> AsyncGenerator[AsyncClient]:
    """Lightweight HTTP client for unit tests without lifespan management."""
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://testserver") as ac:
        yield ac


@pytest.fixture(scope="function")
async def broken_client(broken_engine: AsyncEngine) -> AsyncGenerator[AsyncClient]:
    """Client for an app whose database is unreachable."""
    broken_app = create_app(broken_engine)
    async with AsyncClient(transport=ASGITransport(app=broken_app), base_url="http://testserver") as ac:
        yield ac
