"""Short URL mapping data models.

This module defines the ShortURL model for storing mappings between an
original URL and its sequential numeric short url.
"""
from typing import Optional

from sqlalchemy import BigInteger, Index
from sqlmodel import Field, SQLModel


class ShortURLBase(SQLModel):
    """Base model for mapping data."""

    original_url: str = Field(
        description="The original (long) URL, stored exactly as submitted"
    )
    short_url: int = Field(
        sa_type=BigInteger,
        description="Sequential identifier assigned at creation, starting at 1"
    )


class ShortURL(ShortURLBase, table=True):
    """
    Mapping between an original URL and its short url.

    Uniqueness of ``original_url`` comes from the create-or-find flow in the
    service layer; neither column carries a unique constraint.
    """

    __tablename__ = "short_urls"

    id: Optional[int] = Field(default=None, primary_key=True)

    __table_args__ = (
        Index("ix_short_urls_original_url", "original_url"),
        Index("ix_short_urls_short_url", "short_url"),
    )

    def to_payload(self) -> dict:
        return {"original_url": self.original_url, "short_url": self.short_url}


class ShortURLCreate(ShortURLBase):
    """Schema for creating a new mapping."""
    pass
