"""
Pytest will auto-discover / import this file called 'conftest.py'.
This file defines fixtures/variables required for testing multiple layers.
"""

import os
from typing import AsyncGenerator

import httpx
import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

# Point the application at an in-memory database before anything imports it
DATABASE_URL = "sqlite+aiosqlite:///:memory:"
os.environ["DATABASE_URL"] = DATABASE_URL

from src.api.dependencies import get_game_lookup  # noqa: E402
from src.client.sync_client import GameSyncClient  # noqa: E402
from src.db.database import get_async_db  # noqa: E402
from src.db.schema import Base  # noqa: E402
from src.main import app  # noqa: E402

from tests.fakes import AZUL, CATAN, FakeLookup  # noqa: E402


@pytest.fixture
def fake_lookup() -> FakeLookup:
    return FakeLookup([CATAN, AZUL])


@pytest_asyncio.fixture
async def db_session() -> AsyncGenerator[AsyncSession, None]:
    """Connection to a fresh in-memory test database. Every test gets its own engine, so tests are independent of each other."""
    engine = create_async_engine(
        DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    session_factory = async_sessionmaker(engine, expire_on_commit=False)
    async with session_factory() as db:
        yield db
    await engine.dispose()


class RecordingASGITransport(httpx.ASGITransport):
    """ASGITransport that keeps every request it forwarded to the app."""

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self.requests: list[httpx.Request] = []

    async def handle_async_request(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return await super().handle_async_request(request)


@pytest.fixture
def api_transport() -> RecordingASGITransport:
    return RecordingASGITransport(app=app)


@pytest_asyncio.fixture
async def api_client(
    db_session: AsyncSession, fake_lookup: FakeLookup, api_transport: RecordingASGITransport
) -> AsyncGenerator[httpx.AsyncClient, None]:
    """HTTP client talking to the app in-process, with the test database and the fake lookup plugged in."""

    async def override_get_async_db() -> AsyncGenerator[AsyncSession, None]:
        yield db_session

    app.dependency_overrides[get_async_db] = override_get_async_db
    app.dependency_overrides[get_game_lookup] = lambda: fake_lookup
    try:
        async with httpx.AsyncClient(transport=api_transport, base_url="http://test") as client:
            yield client
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def sync_client(api_client: httpx.AsyncClient) -> GameSyncClient:
    return GameSyncClient(http_client=api_client)
