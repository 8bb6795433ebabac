"""URL Repository for the short URL service.

This module provides the URLRepository class for database operations related to ShortURL models.
"""

from typing import Any, Dict, Optional, Union

from sqlalchemy.ext.asyncio import AsyncSession

from shorturl.models.url import ShortURL, ShortURLCreate
from shorturl.repositories.base import BaseRepository


class URLRepository(BaseRepository[ShortURL, ShortURLCreate]):
    """
    Repository for the mapping store.

    Provides lookup by original URL and by short url, a total count used
    for identifier assignment, and single-record insert.
    """

    def __init__(self):
        """Initialize the repository with the ShortURL model type."""
        super().__init__(ShortURL)

    async def find_by_original_url(self, db: AsyncSession, original_url: str) -> Optional[ShortURL]:
        """
        Find a mapping by exact original URL match.

        Raises:
            RepositoryError: On database errors
        """
        return await self.get_one_by(db, original_url=original_url)

    async def find_by_short_url(self, db: AsyncSession, short_url: int) -> Optional[ShortURL]:
        """
        Find a mapping by its short url.

        If concurrent creation ever assigned the same short url twice, the
        oldest mapping wins.

        Raises:
            RepositoryError: On database errors
        """
        return await self.get_one_by(db, short_url=short_url)

    async def count_all(self, db: AsyncSession) -> int:
        """Count all stored mappings."""
        return await self.count(db)

    async def insert(
        self,
        db: AsyncSession,
        data: Union[ShortURLCreate, Dict[str, Any]]
    ) -> ShortURL:
        """
        Insert a new mapping.

        Raises:
            RepositoryError: On database errors
        """
        return await self.create(db, data)
