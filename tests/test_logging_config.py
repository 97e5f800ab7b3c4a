import json
import logging

import pytest

from mempool_api.config import MempoolConfig, default_config
from mempool_api.logging_config import JsonFormatter, configure_logging, resolve_level


@pytest.fixture
def restore_root_logger():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    root.handlers[:] = handlers
    root.setLevel(level)


def test_logging_level_config():
    level = resolve_level(default_config.log_level)
    assert level in (
        logging.DEBUG,
        logging.INFO,
        logging.WARNING,
        logging.ERROR,
        logging.CRITICAL,
    )


def test_unknown_level_falls_back_to_info():
    assert resolve_level("chatty") == logging.INFO
    assert resolve_level(None) == logging.INFO
    assert resolve_level("debug") == logging.DEBUG


def test_json_formatter_includes_extras():
    record = logging.LogRecord("mempool_api.client", logging.DEBUG, __file__, 1, "GET %s", ("u",), None)
    record.endpoint = "tip_height"
    record.status_code = 503
    payload = json.loads(JsonFormatter().format(record))
    assert payload == {
        "level": "DEBUG",
        "message": "GET u",
        "name": "mempool_api.client",
        "endpoint": "tip_height",
        "status_code": 503,
    }


def test_configure_logging_json(restore_root_logger):
    handler = configure_logging(MempoolConfig(log_level="WARNING", log_format="json"))
    assert isinstance(handler.formatter, JsonFormatter)
    assert restore_root_logger.level == logging.WARNING
    assert handler in restore_root_logger.handlers


def test_configure_logging_plain(restore_root_logger):
    handler = configure_logging(MempoolConfig(log_level="INFO", log_format="plain"))
    assert not isinstance(handler.formatter, JsonFormatter)
