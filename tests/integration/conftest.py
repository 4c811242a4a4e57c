"""Integration test fixtures for database and HTTP client operations.

Every test gets freshly created tables in the SQLite test database, dropped
again afterwards. Uses polyfactory for type-safe test data generation.
"""

from collections.abc import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession
from sqlmodel import SQLModel

from src.taskboard.core import db
from src.taskboard.core.health import reset_health_cache
from src.taskboard.main import create_app
from src.taskboard.models import User
from tests.factories import DEFAULT_TEST_PASSWORD
from tests.helpers import auth_headers, create_user, token_for


@pytest.fixture(scope="function")
async def engine() -> AsyncGenerator[AsyncEngine]:
    """Application engine with all tables created."""
    await db.dispose_engine()
    test_engine = db.get_engine()
    await db.init_db(test_engine)

    yield test_engine

    async with test_engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await db.dispose_engine()


@pytest.fixture
async def db_session(engine: AsyncEngine) -> AsyncGenerator[AsyncSession]:
    """Provide an async session for database operations.

    The session does NOT auto-commit. Tests must call ``await session.commit()``
    to make rows visible to requests, which use their own sessions.
    """
    async with AsyncSession(engine, expire_on_commit=False) as session:
        yield session


@pytest.fixture
async def client(engine: AsyncEngine) -> AsyncGenerator[AsyncClient]:
    """HTTP client bound to a fresh app instance."""
    reset_health_cache()
    app = create_app()
    async with AsyncClient(
        transport=ASGITransport(app=app),
        base_url="http://test",
    ) as client:
        yield client
    reset_health_cache()


@pytest.fixture
async def test_user(db_session: AsyncSession) -> dict:
    """A committed user plus a valid token and auth headers for it."""
    user = await create_user(db_session)
    await db_session.commit()
    token = token_for(user)
    return {
        "user": user,
        "id": str(user.id),
        "email": user.email,
        "password": DEFAULT_TEST_PASSWORD,
        "token": token,
        "headers": auth_headers(token),
    }


@pytest.fixture
async def other_user(db_session: AsyncSession) -> dict:
    """A second committed user, for ownership checks."""
    user: User = await create_user(db_session, name="Other User")
    await db_session.commit()
    token = token_for(user)
    return {"user": user, "id": str(user.id), "token": token, "headers": auth_headers(token)}
