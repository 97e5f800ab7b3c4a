"""
Default transport built on httpx.

Optional: install with the ``httpx`` extra and pass an instance to
:class:`mempool_api.client.AsyncClient`. Any 2xx response returns its body;
429, 500 and 503 are retried with exponential backoff; every other outcome is
raised as a :class:`~mempool_api.errors.TransportError` subclass.
"""

from __future__ import annotations

import asyncio
import logging
from typing import Optional

import httpx

from mempool_api.config import MempoolConfig, default_config
from mempool_api.errors import TransportError
from mempool_api.http import HttpMethod

logger = logging.getLogger(__name__)


class HttpResponseError(TransportError):
    """Raised when the service answers with a non-success status."""

    def __init__(
        self,
        message: str,
        *,
        status_code: int,
        detail: str = "",
        code: Optional[str] = None,
    ) -> None:
        super().__init__(message, code=code, status_code=status_code)
        self.detail = detail


class TransportUnreachableError(TransportError):
    """Raised when the request never produced a response (DNS, connect, timeout)."""


class HttpxTransport:
    """:class:`~mempool_api.http.Http` implementation backed by ``httpx.AsyncClient``."""

    def __init__(
        self,
        config: MempoolConfig | None = None,
        *,
        async_client: Optional[httpx.AsyncClient] = None,
        max_retries: Optional[int] = None,
    ) -> None:
        self.config = config or default_config
        self.max_retries = self.config.max_retries if max_retries is None else max_retries
        self._client: Optional[httpx.AsyncClient] = async_client
        self._owns_client = async_client is None

    async def _get_client(self) -> httpx.AsyncClient:
        if self._client is None:
            self._client = httpx.AsyncClient(timeout=self.config.timeout)
            self._owns_client = True
        return self._client

    async def aclose(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.aclose()
            self._client = None

    async def __aenter__(self) -> "HttpxTransport":
        return self

    async def __aexit__(self, *_exc_info) -> None:
        await self.aclose()

    async def send(self, method: HttpMethod, url: str, body: Optional[bytes] = None) -> bytes:
        response = await self._send_retry(HttpMethod(method), url, body)
        if not response.is_success:
            raise HttpResponseError(
                f"{response.status_code} {response.reason_phrase}".strip(),
                status_code=response.status_code,
                detail=response.text,
            )
        return response.content

    async def _send_retry(self, method: HttpMethod, url: str, body: Optional[bytes]) -> httpx.Response:
        """Send once, then again for retryable statuses until ``max_retries`` is spent."""
        client = await self._get_client()
        content = body if method is HttpMethod.POST else None
        delay = self.config.base_backoff
        attempts = 0
        while True:
            try:
                response = await client.request(method.value, url, content=content)
            except httpx.RequestError as exc:
                logger.warning("Mempool node unreachable for %s %s", method.value, url, extra={"url": url})
                raise TransportUnreachableError("Node unreachable", code=type(exc).__name__) from exc
            if attempts >= self.max_retries or response.status_code not in self.config.retryable_status_codes:
                return response
            attempts += 1
            logger.warning(
                "Retrying %s %s after status %s",
                method.value,
                url,
                response.status_code,
                extra={"url": url, "status_code": response.status_code, "attempt": attempts},
            )
            await asyncio.sleep(delay)
            delay *= 2
