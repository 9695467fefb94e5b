from __future__ import annotations

from urllib.parse import quote, urlencode, urlsplit, urlunsplit

from .errors import UrlBuildError
from .models import Country, Endpoint

BASE_URL = "https://newsapi.org/v2"


def build_url(base_url: str, endpoint: Endpoint, country: Country) -> str:
    """Return ``{base_url}/{endpoint}?country={country}``.

    Any path already on the base is kept; any query or fragment on it is
    replaced so that ``country`` is the only parameter.
    """
    try:
        parts = urlsplit(base_url)
    except ValueError as exc:
        raise UrlBuildError(f"Invalid base URL {base_url!r}: {exc}") from exc
    if parts.scheme not in ("http", "https") or not parts.netloc:
        raise UrlBuildError(f"Base URL must be an absolute http(s) URL, got {base_url!r}")

    path = f"{parts.path.rstrip('/')}/{quote(endpoint.value, safe='')}"
    query = urlencode({"country": country.value})
    return urlunsplit((parts.scheme, parts.netloc, path, query, ""))
