"""HTTP middleware for the short URL service."""

from shorturl.middleware.logging import LoggingMiddleware

__all__ = ["LoggingMiddleware"]
