"""
Typed async client for the mempool.space REST API.

The client is generic over its HTTP transport; see ``mempool_api.http`` for the
contract and ``mempool_api.httpx_transport`` for the optional httpx-based one.
"""

from .client import AsyncClient, join_url
from .errors import (
    DecodeError,
    InvalidBaseUrlError,
    InvalidRequestError,
    MempoolApiError,
    TransportError,
)
from .http import Http, HttpMethod

__all__ = [
    "AsyncClient",
    "join_url",
    "Http",
    "HttpMethod",
    "MempoolApiError",
    "InvalidBaseUrlError",
    "InvalidRequestError",
    "TransportError",
    "DecodeError",
]
