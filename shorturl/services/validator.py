"""Hostname validation for submitted URLs.

A URL counts as valid when what is left after removing its scheme
resolves through DNS. Nothing else about the URL is checked.
"""

import asyncio
import logging
import re
import socket
from typing import Any, Awaitable, Callable, Optional

logger = logging.getLogger(__name__)

SCHEME_PREFIX = re.compile(r"^(\w+:|)//")

# getaddrinfo error codes meaning the name simply does not exist
NOT_FOUND_ERRNOS = {
    code for code in (
        getattr(socket, "EAI_NONAME", None),
        getattr(socket, "EAI_NODATA", None),
    ) if code is not None
}

Resolver = Callable[[str], Awaitable[Any]]


def strip_scheme(url: str) -> str:
    """Remove a leading ``scheme://`` or bare ``//`` from ``url``."""
    return SCHEME_PREFIX.sub("", url, count=1)


async def resolve_host(host: str) -> Any:
    """Resolve ``host`` on the running event loop's resolver."""
    loop = asyncio.get_running_loop()
    return await loop.getaddrinfo(host, None)


class HostnameValidator:
    """
    Checks URLs by resolving their hostname.

    Args:
        resolver: Coroutine function taking a host string; raising any
            ``OSError`` means the host does not resolve.
    """

    def __init__(self, resolver: Optional[Resolver] = None):
        self.resolver = resolver or resolve_host

    async def is_url_valid(self, url: str) -> bool:
        host = strip_scheme(url)
        try:
            await self.resolver(host)
        except socket.gaierror as e:
            if e.errno in NOT_FOUND_ERRNOS:
                logger.info(f"Could not resolve url: {url}")
            else:
                logger.warning(f"DNS lookup error for {url}: {e}")
            return False
        except (OSError, ValueError) as e:
            logger.warning(f"DNS lookup error for {url}: {e}")
            return False

        logger.debug(f"Resolved host for url: {url}")
        return True
