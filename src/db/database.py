"""Generate (async) database sessions"""

import logging
from typing import AsyncGenerator

from sqlalchemy.engine import make_url
from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool

from src.core.config import get_settings
from src.db.schema import Base

logger = logging.getLogger(__name__)

settings = get_settings()


def engine_options(database_url: str) -> dict:
    """Extra create_async_engine() arguments for the given URL."""
    url = make_url(database_url)
    if url.get_backend_name() != "sqlite":
        return {}
    options: dict = {"connect_args": {"check_same_thread": False}}
    # An in-memory database lives only as long as its connection, so every session shares one
    if url.database in (None, "", ":memory:"):
        options["poolclass"] = StaticPool
    return options


engine: AsyncEngine = create_async_engine(
    settings.DATABASE_URL, echo=settings.DEBUG, **engine_options(settings.DATABASE_URL)
)
AsyncSessionLocal = async_sessionmaker(bind=engine, expire_on_commit=False)


async def init_db() -> None:
    """Ensure all tables are created."""
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    logger.info("Database tables ready.")


async def get_async_db() -> AsyncGenerator[AsyncSession, None]:
    async with AsyncSessionLocal() as db:
        yield db
