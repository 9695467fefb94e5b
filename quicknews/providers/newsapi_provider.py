from __future__ import annotations

import logging
from typing import List, Optional

import httpx
import requests

from ..envelope import parse_envelope, unwrap
from ..errors import ResponseDecodeError, TransportError
from ..models import Article, Country, Endpoint
from ..urls import BASE_URL, build_url
from .base import BaseProvider

logger = logging.getLogger(__name__)

DEFAULT_TIMEOUT = 10.0


class NewsAPIProvider(BaseProvider):
    """Fetches headlines from newsapi.org.

    The key goes verbatim into the ``Authorization`` header, without a scheme
    prefix. ``fetch`` blocks on ``requests``; ``fetch_async`` awaits
    ``httpx.AsyncClient``. Both build the URL and read the response the same
    way.
    """

    def __init__(
        self,
        api_key: str,
        *,
        base_url: str = BASE_URL,
        timeout: float = DEFAULT_TIMEOUT,
        session: Optional[requests.Session] = None,
        transport: Optional[httpx.AsyncBaseTransport] = None,
    ) -> None:
        if not api_key:
            raise ValueError("NewsAPIProvider requires an API key")
        self._api_key = api_key
        self._base_url = base_url
        self._timeout = timeout
        self._owns_session = session is None
        self._session = session or requests.Session()
        self._transport = transport
        self._endpoint = Endpoint.TOP_HEADLINES
        self._country = Country.IN

    def endpoint(self, endpoint: Endpoint) -> "NewsAPIProvider":
        self._endpoint = endpoint
        return self

    def country(self, country: Country) -> "NewsAPIProvider":
        self._country = country
        return self

    def close(self) -> None:
        if self._owns_session:
            self._session.close()

    def url(self) -> str:
        return build_url(self._base_url, self._endpoint, self._country)

    @property
    def _headers(self) -> dict:
        return {"Authorization": self._api_key}

    def fetch(self) -> List[Article]:
        url = self.url()
        logger.debug("GET %s", url)
        try:
            response = self._session.get(url, headers=self._headers, timeout=self._timeout)
        except requests.RequestException as exc:
            raise TransportError(f"Failed fetching articles: {exc}") from exc
        except UnicodeError as exc:
            # header values must be latin-1 encodable
            raise TransportError(f"API key cannot be sent in a header: {exc}") from exc
        return _read_articles(response.status_code, response.text)

    async def fetch_async(self) -> List[Article]:
        url = self.url()
        logger.debug("GET %s (async)", url)
        try:
            async with httpx.AsyncClient(timeout=self._timeout, transport=self._transport) as client:
                response = await client.get(url, headers=self._headers)
        except httpx.HTTPError as exc:
            raise TransportError(f"Async request failed: {exc}") from exc
        except UnicodeError as exc:
            raise TransportError(f"API key cannot be sent in a header: {exc}") from exc
        return _read_articles(response.status_code, response.text)


def _read_articles(status_code: int, body: str) -> List[Article]:
    try:
        envelope = parse_envelope(body)
    except ResponseDecodeError:
        if status_code >= 400:
            raise TransportError(f"HTTP {status_code} from news API") from None
        raise
    if status_code >= 400 and envelope.ok:
        raise TransportError(f"HTTP {status_code} from news API")
    return unwrap(envelope)
