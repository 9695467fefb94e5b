from __future__ import annotations

from enum import Enum


class NewsApiError(Exception):
    """Base class for every failure raised while fetching headlines."""


class TransportError(NewsApiError):
    """Raised when the HTTP request itself fails (connection, timeout, TLS, HTTP status)."""


class ResponseDecodeError(NewsApiError):
    """Raised when the response body is not a well-formed envelope."""


class UrlBuildError(NewsApiError):
    """Raised when the configured base address is not a usable URL."""


class BadRequestReason(str, Enum):
    KEY_DISABLED = "key_disabled"
    UNKNOWN = "unknown"


_REASON_MESSAGES = {
    BadRequestReason.KEY_DISABLED: "Your API key has been disabled",
    BadRequestReason.UNKNOWN: "Unknown error",
}


class BadRequestError(NewsApiError):
    """The API answered with a non-"ok" status."""

    def __init__(self, reason: BadRequestReason, code: str | None = None) -> None:
        self.reason = reason
        self.code = code
        super().__init__(f"Request failed: {_REASON_MESSAGES[reason]}")
