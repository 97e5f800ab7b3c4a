"""Logging setup for scripts and applications embedding the client."""

from __future__ import annotations

import json
import logging
from typing import Optional

from mempool_api.config import MempoolConfig, default_config

EXTRA_FIELDS = ("endpoint", "url", "status_code", "attempt")
PLAIN_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


class JsonFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        payload = {
            "level": record.levelname,
            "message": record.getMessage(),
            "name": record.name,
        }
        for key in EXTRA_FIELDS:
            if hasattr(record, key):
                payload[key] = getattr(record, key)
        if record.exc_info:
            payload["error"] = self.formatException(record.exc_info)
        return json.dumps(payload)


def resolve_level(name: Optional[str]) -> int:
    level = getattr(logging, (name or "").upper(), None)
    return level if isinstance(level, int) else logging.INFO


def configure_logging(config: MempoolConfig | None = None) -> logging.Handler:
    """Install a single stream handler on the root logger and return it."""
    config = config or default_config
    handler = logging.StreamHandler()
    if config.log_format.lower() == "json":
        handler.setFormatter(JsonFormatter())
    else:
        handler.setFormatter(logging.Formatter(PLAIN_FORMAT))
    logging.basicConfig(level=resolve_level(config.log_level), handlers=[handler], force=True)
    return handler
