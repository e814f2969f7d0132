import os

os.environ.setdefault("DATABASE_URL", "sqlite+aiosqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret-key")

import pytest
from fakeredis import aioredis as fake_aioredis
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from skillswap.database import get_db, get_redis
from skillswap.main import app
from skillswap.models.base import Base


@pytest.fixture
async def engine():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest.fixture
def session_factory(engine):
    return async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)


@pytest.fixture
async def db_session(session_factory):
    async with session_factory() as session:
        yield session


@pytest.fixture
async def redis_client():
    client = fake_aioredis.FakeRedis(decode_responses=True)
    yield client
    await client.flushall()


@pytest.fixture
async def client(session_factory, redis_client):
    async def override_get_db():
        async with session_factory() as session:
            yield session

    async def override_get_redis():
        return redis_client

    app.dependency_overrides[get_db] = override_get_db
    app.dependency_overrides[get_redis] = override_get_redis
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()


async def register(client, username, password="password123", name=None, **extra):
    payload = {"username": username, "password": password, "name": name or username.split("@")[0].title()}
    payload.update(extra)
    response = await client.post("/api/register", json=payload)
    assert response.status_code == 201, response.text
    return response.json()


async def login(client, username, password="password123"):
    response = await client.post("/api/login", json={"username": username, "password": password})
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture
def make_user(client):
    """Register a user and return ``(user, auth_headers)``."""
    async def _make_user(username, **extra):
        user = await register(client, username, **extra)
        headers = await login(client, username)
        return user, headers

    return _make_user


@pytest.fixture
def make_skill(client):
    async def _make_skill(headers, title, description="", category="Tech", type="teach"):
        response = await client.post(
            "/api/skills",
            json={"title": title, "description": description or title, "category": category, "type": type},
            headers=headers,
        )
        assert response.status_code == 201, response.text
        return response.json()

    return _make_skill
