"""
Request logging middleware for FastAPI using Loguru.

Every request is logged as ``METHOD path - client_ip`` together with its
status code and processing time, including requests whose handler raised.
"""

import time
import uuid

from fastapi import Request, Response
from loguru import logger
from starlette.middleware.base import BaseHTTPMiddleware

from shorturl.core.logging import REQUEST_LEVEL


def get_client_ip(request: Request) -> str:
    """Client address, preferring the first ``X-Forwarded-For`` entry."""
    forwarded = request.headers.get("X-Forwarded-For")
    if forwarded:
        first = forwarded.split(",")[0].strip()
        if first:
            return first
    return request.client.host if request.client else "unknown"


class LoggingMiddleware(BaseHTTPMiddleware):
    """Logs each request and stamps an ``X-Request-ID`` response header."""

    async def dispatch(self, request: Request, call_next) -> Response:
        request_id = str(uuid.uuid4())
        start_time = time.time()
        # Unhandled errors reach the client as a 500
        status_code = 500

        try:
            response = await call_next(request)
            status_code = response.status_code
            response.headers["X-Request-ID"] = request_id
            return response
        finally:
            logger.bind(
                request_id=request_id,
                status_code=status_code,
                process_time_ms=round((time.time() - start_time) * 1000, 2),
            ).log(
                REQUEST_LEVEL,
                f"{request.method} {request.url.path} - {get_client_ip(request)}",
            )
