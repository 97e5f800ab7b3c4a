"""
Configuration helpers for the mempool API client.

The client itself only needs a base URL. Timeouts and retry counts are read
here for the bundled httpx transport, and the log settings for
:func:`mempool_api.logging_config.configure_logging`.
"""

from __future__ import annotations

import os
from dataclasses import dataclass, field

DEFAULT_BASE_URL_VALUE = "https://mempool.space/api"
DEFAULT_TIMEOUT_VALUE = 10.0
DEFAULT_MAX_RETRIES_VALUE = 6

BASE_URL_ENV_VAR = "MEMPOOL_BASE_URL"
TIMEOUT_ENV_VAR = "MEMPOOL_HTTP_TIMEOUT"
MAX_RETRIES_ENV_VAR = "MEMPOOL_MAX_RETRIES"


def _load_base_url() -> str:
    return os.getenv(BASE_URL_ENV_VAR, "").strip() or DEFAULT_BASE_URL_VALUE


def _load_timeout() -> float:
    raw_timeout = os.getenv(TIMEOUT_ENV_VAR)
    if raw_timeout:
        try:
            parsed = float(raw_timeout)
        except ValueError:
            return DEFAULT_TIMEOUT_VALUE
        return parsed if parsed > 0 else DEFAULT_TIMEOUT_VALUE
    return DEFAULT_TIMEOUT_VALUE


def _load_max_retries() -> int:
    raw_retries = os.getenv(MAX_RETRIES_ENV_VAR)
    if raw_retries:
        try:
            parsed = int(raw_retries)
        except ValueError:
            return DEFAULT_MAX_RETRIES_VALUE
        return parsed if parsed >= 0 else DEFAULT_MAX_RETRIES_VALUE
    return DEFAULT_MAX_RETRIES_VALUE


DEFAULT_BASE_URL = _load_base_url()
DEFAULT_TIMEOUT = _load_timeout()
DEFAULT_MAX_RETRIES = _load_max_retries()

# Retry backoff for the httpx transport: 256 ms, doubled after every attempt.
BASE_BACKOFF_SECONDS = 0.256
RETRYABLE_STATUS_CODES = frozenset({429, 500, 503})

LOG_LEVEL = os.getenv("MEMPOOL_LOG_LEVEL", "INFO")
LOG_FORMAT = os.getenv("MEMPOOL_LOG_FORMAT", "plain")  # json or plain


@dataclass(slots=True)
class MempoolConfig:
    """Runtime configuration for talking to a mempool instance."""

    base_url: str = DEFAULT_BASE_URL
    timeout: float = DEFAULT_TIMEOUT
    max_retries: int = DEFAULT_MAX_RETRIES
    base_backoff: float = BASE_BACKOFF_SECONDS
    retryable_status_codes: frozenset[int] = field(default_factory=lambda: RETRYABLE_STATUS_CODES)
    log_level: str = LOG_LEVEL
    log_format: str = LOG_FORMAT

    @classmethod
    def from_env(cls) -> "MempoolConfig":
        """Build a config from the current environment rather than import-time defaults."""
        return cls(
            base_url=_load_base_url(),
            timeout=_load_timeout(),
            max_retries=_load_max_retries(),
            log_level=os.getenv("MEMPOOL_LOG_LEVEL", "INFO"),
            log_format=os.getenv("MEMPOOL_LOG_FORMAT", "plain"),
        )


default_config = MempoolConfig()
