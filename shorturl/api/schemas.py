"""API response schemas.

Success and error responses share status 200; clients tell them apart by
which field is present.
"""

from pydantic import BaseModel


INVALID_URL = "invalid URL"
SHORT_URL_NOT_FOUND = "Short url does not exist"


class ShortURLResponse(BaseModel):
    """Response schema for a created or existing mapping."""
    original_url: str
    short_url: int


class ErrorResponse(BaseModel):
    """Response schema for validation and lookup errors."""
    error: str
