"""URL shortening service for the short URL service.

This module contains the ShortenedURLService class which implements the
create-or-find and resolve operations on top of the mapping store and the
hostname validator.
"""

import logging
import re
from typing import Any, Dict, Optional

from sqlalchemy.ext.asyncio import AsyncSession

from shorturl.repositories.base import RepositoryError
from shorturl.repositories.url_repository import URLRepository
from shorturl.services.exceptions import InvalidURLError, ShortURLNotFoundError
from shorturl.services.validator import HostnameValidator

logger = logging.getLogger(__name__)

# Largest value a BIGINT column holds
MAX_SHORT_URL = 2 ** 63 - 1

# ASCII digits, optionally followed by a zero fraction such as "10.0"
SHORT_URL_PATTERN = re.compile(r"[0-9]+(?:\.0+)?")


class ShortenedURLService:
    """
    Service for URL shortening business logic.

    Short urls are plain integers handed out in creation order: the next
    one is the current mapping count plus one. The count and the insert are
    separate queries with no lock between them, so two concurrent creations
    of different URLs can receive the same short url.
    """

    def __init__(self, url_repository: URLRepository, validator: HostnameValidator):
        """
        Initialize the URL shortening service.

        Args:
            url_repository: Repository for mapping data access
            validator: Hostname validator used for URLs not seen before
        """
        self.url_repository = url_repository
        self.validator = validator

    async def create_or_find(self, db: AsyncSession, original_url: Optional[str]) -> Dict[str, Any]:
        """
        Return the mapping for ``original_url``, creating it if needed.

        An existing mapping is returned as-is, without validating the URL
        again. A failed insert is logged and the new mapping is still
        returned.

        Args:
            db: Database session
            original_url: The URL exactly as submitted

        Returns:
            Dict with ``original_url`` and ``short_url``

        Raises:
            InvalidURLError: If the URL is missing or its hostname does not resolve
            RepositoryError: If the lookup or count query fails
        """
        if not original_url:
            raise InvalidURLError("No URL provided")

        found = await self.url_repository.find_by_original_url(db, original_url)
        if found is not None:
            return found.to_payload()

        if not await self.validator.is_url_valid(original_url):
            raise InvalidURLError(f"Hostname does not resolve: {original_url}")

        count = await self.url_repository.count_all(db)
        data = {"original_url": original_url, "short_url": count + 1}

        try:
            await self.url_repository.insert(db, data)
        except RepositoryError as e:
            logger.error(f"Failed to save mapping for {original_url}: {e}")

        return data

    async def resolve(self, db: AsyncSession, short_url: Any) -> str:
        """
        Get the original URL for ``short_url``.

        The identifier usually arrives as path text. Only ASCII digits,
        optionally with a zero fraction (``"10.0"``), name a mapping; signs,
        whitespace, underscores and other digit scripts match nothing.

        Raises:
            ShortURLNotFoundError: If no mapping has this short url
            RepositoryError: If the lookup query fails
        """
        text = str(short_url)
        if not SHORT_URL_PATTERN.fullmatch(text):
            raise ShortURLNotFoundError(f"Short url '{short_url}' is not a number")

        try:
            short_url_id = int(text.split(".")[0])
        except ValueError:
            # Past the interpreter's digit limit for int conversion
            raise ShortURLNotFoundError(f"Short url '{short_url}' not found")

        if not 1 <= short_url_id <= MAX_SHORT_URL:
            raise ShortURLNotFoundError(f"Short url '{short_url}' not found")

        mapping = await self.url_repository.find_by_short_url(db, short_url_id)
        if mapping is None:
            raise ShortURLNotFoundError(f"Short url '{short_url}' not found")

        return mapping.original_url
