"""
Transport capability consumed by the client.

A transport is anything with an awaitable ``send(method, url, body)`` that
returns the raw response bytes or raises :class:`TransportError`. The client
never looks past this contract, so httpx, aiohttp or a test double can all be
plugged in without touching the endpoint code.
"""

from __future__ import annotations

import enum
from typing import Optional, Protocol, runtime_checkable

from mempool_api.errors import TransportError

__all__ = ["HttpMethod", "Http", "TransportError"]


class HttpMethod(str, enum.Enum):
    """HTTP verbs used by the service."""

    GET = "GET"
    POST = "POST"


@runtime_checkable
class Http(Protocol):
    """Behaviour required of an HTTP transport."""

    async def send(
        self,
        method: HttpMethod,
        url: str,
        body: Optional[bytes] = None,
    ) -> bytes:
        """
        Send ``method`` to the absolute ``url`` and return the response body.

        ``body`` is ignored for GET. Implementations raise
        :class:`TransportError` (or a subclass) for every failure, including
        whichever status codes they treat as unsuccessful.
        """
        ...
