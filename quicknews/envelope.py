from __future__ import annotations

import json
from enum import Enum
from typing import Any, List, Mapping, Optional

from .errors import BadRequestError, BadRequestReason, ResponseDecodeError
from .models import Article, Envelope


class ErrorCode(str, Enum):
    """Error codes the API is known to send that get a dedicated message."""

    API_KEY_DISABLE = "apiKeyDisable"


_REASONS = {
    ErrorCode.API_KEY_DISABLE: BadRequestReason.KEY_DISABLED,
}


def parse_envelope(body: str) -> Envelope:
    try:
        payload = json.loads(body)
    except (TypeError, ValueError) as exc:
        raise ResponseDecodeError(f"Response body is not valid JSON: {exc}") from exc
    except RecursionError as exc:
        raise ResponseDecodeError("Response body is nested too deeply") from exc
    if not isinstance(payload, dict):
        raise ResponseDecodeError("Response body must be a JSON object")

    status = payload.get("status")
    if not isinstance(status, str):
        raise ResponseDecodeError("Response is missing a string 'status'")

    code = payload.get("code")
    if code is not None and not isinstance(code, str):
        raise ResponseDecodeError("Response 'code' must be a string or null")

    raw_articles = payload.get("articles")
    if raw_articles is None and status != "ok":
        # error envelopes carry no article list
        raw_articles = []
    if not isinstance(raw_articles, list):
        raise ResponseDecodeError("Response 'articles' must be a list")

    return Envelope(status=status, articles=_parse_articles(raw_articles), code=code)


def _parse_articles(raw_articles: List[Any]) -> List[Article]:
    articles: List[Article] = []
    for index, raw in enumerate(raw_articles):
        if not isinstance(raw, Mapping):
            raise ResponseDecodeError(f"Article {index} is not an object")
        title = raw.get("title")
        url = raw.get("url")
        description = raw.get("description")
        if not isinstance(title, str) or not isinstance(url, str):
            raise ResponseDecodeError(f"Article {index} needs string 'title' and 'url'")
        if description is not None and not isinstance(description, str):
            raise ResponseDecodeError(f"Article {index} 'description' must be a string or null")
        articles.append(Article(title=title, url=url, description=description))
    return articles


def classify_error(code: Optional[str]) -> BadRequestError:
    """Map an envelope error code to the error raised for it. Never fails."""
    if not code:
        return BadRequestError(BadRequestReason.UNKNOWN)
    try:
        known = ErrorCode(code)
    except ValueError:
        return BadRequestError(BadRequestReason.UNKNOWN, code=code)
    return BadRequestError(_REASONS[known], code=code)


def unwrap(envelope: Envelope) -> List[Article]:
    """Return the envelope's articles or raise the classified error."""
    if envelope.ok:
        return envelope.articles
    raise classify_error(envelope.code)
