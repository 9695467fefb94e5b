from __future__ import annotations

import os
from dataclasses import dataclass
from typing import Optional

from .urls import BASE_URL

_TRUTHY = {"1", "true", "yes", "on"}


def _parse_bool(value: Optional[str], default: bool = False) -> bool:
    if value is None or value.strip() == "":
        return default
    return value.strip().lower() in _TRUTHY


@dataclass(slots=True)
class NewsConfig:
    """Runtime configuration for the headline reader."""

    api_key: str = ""
    dark_mode: bool = False
    base_url: str = BASE_URL
    request_timeout: float = 10.0
    use_mock: bool = False
    log_level: str = "INFO"

    @classmethod
    def from_env(cls) -> "NewsConfig":
        return cls(
            api_key=os.getenv("NEWSAPI_KEY", ""),
            dark_mode=_parse_bool(os.getenv("QUICKNEWS_DARK_MODE")),
            base_url=os.getenv("QUICKNEWS_BASE_URL") or BASE_URL,
            request_timeout=_parse_timeout(os.getenv("QUICKNEWS_REQUEST_TIMEOUT"), default=10.0),
            use_mock=_parse_bool(os.getenv("QUICKNEWS_USE_MOCK")),
            log_level=(os.getenv("QUICKNEWS_LOG_LEVEL") or "INFO").upper(),
        )


def _parse_timeout(value: Optional[str], default: float) -> float:
    if value is None or value.strip() == "":
        return default
    try:
        parsed = float(value)
    except ValueError:
        raise ValueError("QUICKNEWS_REQUEST_TIMEOUT must be a number if set") from None
    if parsed <= 0:
        raise ValueError("QUICKNEWS_REQUEST_TIMEOUT must be positive")
    return parsed
