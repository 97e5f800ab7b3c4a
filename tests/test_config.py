from mempool_api.config import (
    DEFAULT_BASE_URL_VALUE,
    MempoolConfig,
    _load_base_url,
    _load_max_retries,
    _load_timeout,
)


def test_load_timeout_invalid_env(monkeypatch):
    monkeypatch.setenv("MEMPOOL_HTTP_TIMEOUT", "not-a-number")
    assert _load_timeout() == 10.0  # falls back to default on parse error


def test_load_timeout_valid_env(monkeypatch):
    monkeypatch.setenv("MEMPOOL_HTTP_TIMEOUT", "5.5")
    assert _load_timeout() == 5.5


def test_load_timeout_non_positive(monkeypatch):
    monkeypatch.setenv("MEMPOOL_HTTP_TIMEOUT", "0")
    assert _load_timeout() == 10.0


def test_load_max_retries(monkeypatch):
    monkeypatch.setenv("MEMPOOL_MAX_RETRIES", "2")
    assert _load_max_retries() == 2
    monkeypatch.setenv("MEMPOOL_MAX_RETRIES", "-1")
    assert _load_max_retries() == 6
    monkeypatch.setenv("MEMPOOL_MAX_RETRIES", "many")
    assert _load_max_retries() == 6


def test_base_url_env_and_blank_fallback(monkeypatch):
    monkeypatch.setenv("MEMPOOL_BASE_URL", "https://mempool.space/testnet/api")
    assert _load_base_url() == "https://mempool.space/testnet/api"
    monkeypatch.setenv("MEMPOOL_BASE_URL", "  ")
    assert _load_base_url() == DEFAULT_BASE_URL_VALUE


def test_from_env_reads_current_environment(monkeypatch):
    monkeypatch.setenv("MEMPOOL_BASE_URL", "http://localhost:8999/api")
    monkeypatch.setenv("MEMPOOL_HTTP_TIMEOUT", "3")
    monkeypatch.setenv("MEMPOOL_MAX_RETRIES", "0")
    monkeypatch.setenv("MEMPOOL_LOG_FORMAT", "json")
    config = MempoolConfig.from_env()
    assert config.base_url == "http://localhost:8999/api"
    assert config.timeout == 3.0
    assert config.max_retries == 0
    assert config.log_format == "json"
    assert 503 in config.retryable_status_codes
