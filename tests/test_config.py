"""Tests for environment-driven configuration."""

from __future__ import annotations

import pytest

from quicknews.config import NewsConfig
from quicknews.urls import BASE_URL

_VARS = (
    "NEWSAPI_KEY",
    "QUICKNEWS_DARK_MODE",
    "QUICKNEWS_BASE_URL",
    "QUICKNEWS_REQUEST_TIMEOUT",
    "QUICKNEWS_USE_MOCK",
    "QUICKNEWS_LOG_LEVEL",
)


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    for name in _VARS:
        monkeypatch.delenv(name, raising=False)


class TestFromEnv:
    def test_defaults(self) -> None:
        config = NewsConfig.from_env()
        assert config == NewsConfig()
        assert config.base_url == BASE_URL
        assert config.request_timeout == 10.0

    def test_values(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("NEWSAPI_KEY", "abc")
        monkeypatch.setenv("QUICKNEWS_DARK_MODE", "yes")
        monkeypatch.setenv("QUICKNEWS_BASE_URL", "http://localhost:8000/v2")
        monkeypatch.setenv("QUICKNEWS_REQUEST_TIMEOUT", "2.5")
        monkeypatch.setenv("QUICKNEWS_USE_MOCK", "1")
        monkeypatch.setenv("QUICKNEWS_LOG_LEVEL", "debug")
        config = NewsConfig.from_env()
        assert config.api_key == "abc"
        assert config.dark_mode is True
        assert config.base_url == "http://localhost:8000/v2"
        assert config.request_timeout == 2.5
        assert config.use_mock is True
        assert config.log_level == "DEBUG"

    @pytest.mark.parametrize("value", ["soon", "0", "-1"])
    def test_bad_timeout(self, monkeypatch: pytest.MonkeyPatch, value: str) -> None:
        monkeypatch.setenv("QUICKNEWS_REQUEST_TIMEOUT", value)
        with pytest.raises(ValueError, match="QUICKNEWS_REQUEST_TIMEOUT"):
            NewsConfig.from_env()
