"""API dependencies for FastAPI.

This module provides dependency injection functions for FastAPI endpoints
to access service instances and the submitted URL.
"""

from typing import Optional

from fastapi import Depends, Request
from loguru import logger

from shorturl.repositories.url_repository import URLRepository
from shorturl.services.shortener import ShortenedURLService
from shorturl.services.validator import HostnameValidator


async def get_url_repository():
    """Get an instance of the URL repository."""
    return URLRepository()


async def get_hostname_validator():
    """Get an instance of the hostname validator."""
    return HostnameValidator()


async def get_shortener_service(
    url_repo: URLRepository = Depends(get_url_repository),
    validator: HostnameValidator = Depends(get_hostname_validator),
) -> ShortenedURLService:
    """Get an instance of the URL shortening service."""
    return ShortenedURLService(url_repository=url_repo, validator=validator)


async def get_submitted_url(request: Request) -> Optional[str]:
    """Read the ``url`` field from a JSON or form-encoded request body."""
    content_type = request.headers.get("content-type", "")
    try:
        if content_type.startswith("application/json"):
            body = await request.json()
            value = body.get("url") if isinstance(body, dict) else None
        else:
            form = await request.form()
            value = form.get("url")
    except ValueError as e:
        logger.warning(f"Could not parse request body: {e}")
        return None

    if value is None:
        return None
    return str(value)
