"""Service test fixtures — async DB + FastAPI test client.

Invariants:
    - Every test gets a fresh in-memory SQLite database built from Base.metadata
    - get_db dependency overridden to use the test session factory
    - Hasher pinned to the "salt" salt regardless of environment

Design Decisions:
    - SQLite in-memory: fast, no external dependency; UNIQUE constraints behave
      like PostgreSQL for the conflict paths exercised here
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from httpx import ASGITransport, AsyncClient

from account_service.api.dependencies import get_password_hasher
from account_service.core.credentials import PasswordHasher
from account_service.db.base import Base
from account_service.infrastructure.database import get_db
import account_service.models  # noqa: F401
from account_service.main import app
from tests.services.account_payloads import SIGNUP_PAYLOAD


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.drop_all)
    await engine.dispose()


@pytest.fixture
async def test_session_factory(test_engine):
    return async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False,
    )


@pytest.fixture
async def test_db(test_session_factory):
    async with test_session_factory() as session:
        yield session


@pytest.fixture
def hasher():
    return PasswordHasher("salt")


@pytest.fixture
async def client(test_session_factory, hasher):
    """FastAPI test client with DB and hasher dependencies overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_password_hasher] = lambda: hasher

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()


@pytest.fixture
async def registered_user(client):
    """Sign up the default user through the API and return its public record."""
    res = await client.post("/api/signup", json=SIGNUP_PAYLOAD)
    assert res.status_code == 201
    return res.json()["user"]
