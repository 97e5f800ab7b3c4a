"""Exceptions raised by the mempool API client and its transports."""

from __future__ import annotations

from typing import Optional


class MempoolApiError(Exception):
    """Base exception for mempool API errors."""

    def __init__(
        self,
        message: str,
        *,
        code: Optional[str] = None,
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.code = code
        self.status_code = status_code


class InvalidBaseUrlError(MempoolApiError, ValueError):
    """Raised when a client is constructed with an unusable base URL."""


class InvalidRequestError(MempoolApiError, ValueError):
    """Raised when an endpoint path cannot be built from the given parameters."""


class TransportError(MempoolApiError):
    """Raised by a transport when a request could not be completed."""


class DecodeError(MempoolApiError):
    """Raised when a response payload does not match the expected shape."""

    def __init__(
        self,
        message: str,
        *,
        payload: bytes = b"",
        code: Optional[str] = None,
        status_code: Optional[int] = None,
    ) -> None:
        super().__init__(message, code=code, status_code=status_code)
        self.payload = payload
