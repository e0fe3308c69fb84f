"""Pytest configuration and fixtures for HotelBook tests."""

import os

# Settings are read at import time, so the test environment goes first
os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite:///:memory:")
os.environ.setdefault("PASSWORD_SCHEMES", '["pbkdf2_sha256"]')
os.environ.setdefault("RATE_LIMIT_ENABLED", "false")

from contextlib import asynccontextmanager
from typing import AsyncGenerator

import pytest
import pytest_asyncio
from httpx import AsyncClient, ASGITransport
from sqlalchemy.ext.asyncio import AsyncSession, create_async_engine, async_sessionmaker
from sqlalchemy.pool import StaticPool

from hotelbook.db.base import Base
from hotelbook.db.session import get_db
# Import all models to ensure they are registered with Base.metadata
from hotelbook.models import Account, Listing, Review  # noqa: F401

from helpers import register

# Test database URL - use SQLite for tests
# Using StaticPool ensures all connections share the same in-memory database
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture(scope="function")
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Create a test database session on a fresh in-memory database."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        poolclass=StaticPool,
        echo=False,
        connect_args={"check_same_thread": False},
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    async_session_factory = async_sessionmaker(
        engine,
        class_=AsyncSession,
        expire_on_commit=False,
    )

    async with async_session_factory() as session:
        yield session
        await session.rollback()

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture(scope="function")
async def client(db_session: AsyncSession) -> AsyncGenerator[AsyncClient, None]:
    """Create a test HTTP client that keeps the session cookie between requests."""
    from hotelbook.main import create_application

    # Create app without the lifespan that touches the configured database
    @asynccontextmanager
    async def test_lifespan(app):
        yield

    test_app = create_application()
    test_app.router.lifespan_context = test_lifespan

    async def override_get_db():
        yield db_session

    test_app.dependency_overrides[get_db] = override_get_db

    transport = ASGITransport(app=test_app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    test_app.dependency_overrides.clear()


@pytest.fixture
def mock_account_data():
    """Sample registration form."""
    return {
        "username": "alice",
        "email": "a@example.com",
        "password": "secret",
    }


@pytest.fixture
def mock_hotel_data():
    """Sample listing form."""
    return {
        "title": "Grand Inn",
        "price": "42",
        "image": "http://x/y.jpg",
        "location": "Paris, FR",
        "description": "nice",
    }


@pytest_asyncio.fixture
async def alice_client(client: AsyncClient, mock_account_data) -> AsyncClient:
    """A client signed in as alice."""
    response = await register(client, **mock_account_data)
    assert response.status_code == 303
    return client
