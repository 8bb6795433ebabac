"""Session management for database operations.

This module provides the FastAPI dependency that hands each request a
session from the process-wide session factory created at startup.
"""

from typing import AsyncGenerator
import logging

from fastapi import Request
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.exc import SQLAlchemyError

from shorturl.db.base import get_session

logger = logging.getLogger(__name__)


async def get_db(request: Request) -> AsyncGenerator[AsyncSession, None]:
    """FastAPI dependency for database sessions.

    Uses the session factory stored on ``app.state`` during startup, so all
    requests share one engine.

    Yields:
        AsyncSession: A SQLAlchemy async session object.
    """
    session_factory = request.app.state.session_factory
    async with get_session(session_factory) as session:
        try:
            yield session
        except SQLAlchemyError:
            logger.exception("Database error occurred")
            await session.rollback()
            raise
        except Exception:
            logger.exception("Unexpected error during database session")
            await session.rollback()
            raise
