"""Core module for the short URL service."""

from shorturl.core.config import settings
from shorturl.core.logging import setup_logging

__all__ = ["settings", "setup_logging"]
