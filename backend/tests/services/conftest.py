"""Service test fixtures — async DB + FastAPI test client + signed-in users.

Invariants:
    - Every test gets a fresh in-memory SQLite database
    - get_db dependency overridden to use test DB session
    - db_manager patched so the readiness probe talks to the test engine
    - Users are registered through the real /api/auth/register route

Design Decisions:
    - SQLite in-memory: fast, no external dependency, sufficient for route tests
      (FOR UPDATE row locks are a no-op here; PostgreSQL-only behavior not exercised)
    - StaticPool: every session shares the one in-memory connection
"""

import pytest
from sqlalchemy.ext.asyncio import (
    AsyncSession, create_async_engine, async_sessionmaker,
)
from sqlalchemy.pool import StaticPool
from httpx import ASGITransport, AsyncClient

from eureka.db.base import Base
import eureka.models  # noqa: F401
from eureka.infrastructure.database import get_db, DatabaseSessionManager
import eureka.infrastructure.database as db_module
from eureka.main import app


@pytest.fixture
async def test_engine():
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:", echo=False, poolclass=StaticPool,
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
async def client(test_engine, test_session_factory):
    """FastAPI test client with DB dependency overridden."""
    async def override_get_db():
        async with test_session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db

    original_manager = db_module.db_manager
    fake_manager = DatabaseSessionManager.__new__(DatabaseSessionManager)
    fake_manager.engine = test_engine
    fake_manager._session_factory = test_session_factory
    db_module.db_manager = fake_manager

    async with AsyncClient(
        transport=ASGITransport(app=app), base_url="http://test",
    ) as c:
        yield c

    app.dependency_overrides.clear()
    db_module.db_manager = original_manager


# ─── Users ──────────────────────────────────────────────────────

async def register_user(client, username: str) -> dict:
    """Register through the API; returns {"id", "token", "headers"}."""
    res = await client.post("/api/auth/register", json={
        "username": username,
        "email": f"{username}@example.com",
        "password": "correct-horse-battery",
    })
    assert res.status_code == 201, res.text
    body = res.json()
    return {
        "id": body["user"]["id"],
        "token": body["token"],
        "headers": {"Authorization": f"Bearer {body['token']}"},
    }


@pytest.fixture
async def alice(client):
    return await register_user(client, "alice")


@pytest.fixture
async def bob(client):
    return await register_user(client, "bob")


@pytest.fixture
async def carol(client):
    return await register_user(client, "carol")


# ─── Content ────────────────────────────────────────────────────

@pytest.fixture
def post_question(client):
    """Factory: create a question as the given user, return its JSON."""
    async def _post(user: dict, **overrides) -> dict:
        payload = {"title": "Why is the sky blue?", "content": "Asking for a kid."}
        payload.update(overrides)
        res = await client.post(
            "/api/questions", json=payload, headers=user["headers"],
        )
        assert res.status_code == 201, res.text
        return res.json()
    return _post


@pytest.fixture
def post_answer(client):
    """Factory: answer a question as the given user, return its JSON."""
    async def _post(user: dict, question_id: str, content: str = "Rayleigh scattering.") -> dict:
        res = await client.post(
            "/api/answers",
            json={"questionId": question_id, "content": content},
            headers=user["headers"],
        )
        assert res.status_code == 201, res.text
        return res.json()
    return _post


@pytest.fixture
def register(client):
    """Factory: register an extra user by name."""
    async def _register(username: str) -> dict:
        return await register_user(client, username)
    return _register
