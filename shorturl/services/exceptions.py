"""Exceptions for the short URL service layer.

This module contains the exception hierarchy for the service layer,
providing domain-specific exceptions that abstract underlying implementation details.
"""


class ServiceError(Exception):
    """Base exception for all service-level errors."""
    pass


class URLError(ServiceError):
    """Base exception for URL-related errors."""
    pass


class InvalidURLError(URLError):
    """The URL failed hostname validation."""
    pass


class ShortURLNotFoundError(URLError):
    """No mapping exists for the requested short url."""
    pass
