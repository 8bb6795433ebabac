"""Database base configuration for SQLAlchemy with SQLModel.

The engine and session factory are built once at application startup and
handed to request handlers through ``app.state``; nothing here creates a
connection at import time.
"""

from typing import AsyncGenerator, Dict, Optional
import logging
from contextlib import asynccontextmanager

from sqlalchemy.ext.asyncio import (
    AsyncEngine,
    AsyncSession,
    async_sessionmaker,
    create_async_engine,
)
from sqlalchemy.pool import StaticPool
from sqlmodel import SQLModel

from shorturl.core.config import settings, Settings
# Register table models with SQLModel metadata
from shorturl.models import ShortURL  # noqa: F401

logger = logging.getLogger(__name__)


def get_engine_config(database_url: str, echo: bool) -> Dict:
    """Get engine keyword arguments for the given connection string.

    An in-memory SQLite database only lives as long as its connection, so it
    is pinned to a single shared connection.
    """
    config: Dict = {"echo": echo}
    if database_url.startswith("sqlite") and ":memory:" in database_url:
        config["connect_args"] = {"check_same_thread": False}
        config["poolclass"] = StaticPool
    elif not database_url.startswith("sqlite"):
        config["pool_pre_ping"] = True
    return config


def get_engine(app_settings: Optional[Settings] = None) -> AsyncEngine:
    """Create and configure an async SQLAlchemy engine.

    Returns:
        AsyncEngine: Configured SQLAlchemy async engine instance.
    """
    app_settings = app_settings or settings
    engine_url = str(app_settings.DATABASE_URL)

    logger.info(f"Creating database engine for {engine_url.split('@')[-1]}")

    return create_async_engine(
        engine_url,
        **get_engine_config(engine_url, app_settings.DB_ECHO),
    )


def get_session_factory(engine: AsyncEngine) -> async_sessionmaker:
    """Build the async session factory bound to ``engine``."""
    return async_sessionmaker(
        bind=engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autoflush=False,
    )


async def init_models(engine: AsyncEngine) -> bool:
    """Create missing tables.

    Connection failures are logged and reported through the return value;
    the application keeps running without a reachable store.
    """
    try:
        async with engine.begin() as conn:
            await conn.run_sync(SQLModel.metadata.create_all)
    except Exception as e:
        logger.error(f"Could not initialise database: {e}")
        return False
    logger.info("Database tables ready")
    return True


@asynccontextmanager
async def get_session(session_factory: async_sessionmaker) -> AsyncGenerator[AsyncSession, None]:
    """Get async session with proper error handling and cleanup.

    Yields:
        AsyncSession: SQLAlchemy async session
    """
    session = session_factory()
    try:
        yield session
    finally:
        await session.close()
