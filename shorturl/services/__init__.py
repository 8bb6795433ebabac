"""Service layer for the short URL service.

Services orchestrate interactions between repositories and the hostname
validator and provide the domain operations used by the API.
"""

from shorturl.services.shortener import ShortenedURLService
from shorturl.services.validator import HostnameValidator

__all__ = ["ShortenedURLService", "HostnameValidator"]
