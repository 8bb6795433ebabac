"""
Data models for the short URL service.

This module imports and exports all SQLModel models used in the application.
"""

# First import SQLModel itself to ensure metadata is initialized
from sqlmodel import SQLModel

from shorturl.models.url import (
    ShortURL,
    ShortURLBase,
    ShortURLCreate,
)

__all__ = [
    "SQLModel",
    "ShortURL",
    "ShortURLBase",
    "ShortURLCreate",
]
