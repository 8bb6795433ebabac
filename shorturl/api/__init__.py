"""API package for the short URL service.

This package contains the API layer components including routes,
response schemas, and dependency providers.
"""

from shorturl.api.routes import build_api_router

__all__ = ["build_api_router"]
