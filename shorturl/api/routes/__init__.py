"""Routes package initialization.

This module builds the route collection for the application.
"""

from fastapi import APIRouter

from shorturl.api.routes import shortener, views


def build_api_router(api_prefix: str) -> APIRouter:
    """Create the root router with the shortener routes under ``api_prefix``."""
    api_router = APIRouter()

    api_router.include_router(
        shortener.router,
        prefix=api_prefix
    )

    # Landing page at the root path
    api_router.include_router(
        views.router
    )

    return api_router


__all__ = ["build_api_router"]
