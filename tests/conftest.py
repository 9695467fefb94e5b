"""Shared fixtures for the quicknews test suite."""

from __future__ import annotations

import json
import threading
import time
from typing import Callable, List, Optional

import pytest

from quicknews.models import Article
from quicknews.providers.base import BaseProvider


def envelope_body(articles: Optional[list] = None, status: str = "ok", code: Optional[str] = None) -> str:
    payload: dict = {"status": status, "articles": articles or []}
    if code is not None:
        payload["code"] = code
    return json.dumps(payload)


@pytest.fixture()
def sample_articles() -> list[dict]:
    return [
        {"title": "First headline", "url": "https://example.com/1", "description": "One"},
        {"title": "Second headline", "url": "https://example.com/2", "description": None},
        {"title": "Third headline", "url": "https://example.com/3", "description": "Three"},
    ]


class RecordingProviders:
    """Provider factory that records every key it is built with.

    ``results`` is consumed one entry per fetch: a list of articles or an
    exception to raise. Once exhausted, fetches return ``default``. ``gate``,
    when set, makes every fetch wait for it before returning.
    """

    def __init__(self, results: Optional[list] = None, default: Optional[List[Article]] = None) -> None:
        self.results = list(results or [])
        self.default = default or []
        self.keys: List[str] = []
        self.built: List[str] = []
        self.closed: List[str] = []
        self.fetch_started = threading.Event()
        self.gate: Optional[threading.Event] = None
        self._lock = threading.Lock()
        self._calls = threading.Condition(self._lock)

    def __call__(self, api_key: str) -> BaseProvider:
        with self._lock:
            self.built.append(api_key)
        return _RecordingProvider(self, api_key)

    def wait_for_calls(self, count: int, timeout: float = 2.0) -> bool:
        with self._calls:
            return self._calls.wait_for(lambda: len(self.keys) >= count, timeout=timeout)

    def _fetch(self, api_key: str) -> List[Article]:
        with self._calls:
            self.keys.append(api_key)
            result = self.results.pop(0) if self.results else self.default
        self.fetch_started.set()
        if self.gate is not None:
            self.gate.wait(timeout=5)
        with self._calls:
            self._calls.notify_all()
        if isinstance(result, Exception):
            raise result
        return list(result)


class _RecordingProvider(BaseProvider):
    def __init__(self, owner: RecordingProviders, api_key: str) -> None:
        self._owner = owner
        self._api_key = api_key

    def fetch(self) -> List[Article]:
        return self._owner._fetch(self._api_key)

    def close(self) -> None:
        with self._owner._lock:
            self._owner.closed.append(self._api_key)


@pytest.fixture()
def make_providers() -> Callable[..., RecordingProviders]:
    return RecordingProviders


@pytest.fixture()
def envelope() -> Callable[..., str]:
    return envelope_body


@pytest.fixture()
def wait_until() -> Callable[..., bool]:
    def _wait(predicate: Callable[[], bool], timeout: float = 2.0) -> bool:
        deadline = time.monotonic() + timeout
        while time.monotonic() < deadline:
            if predicate():
                return True
            time.sleep(0.01)
        return predicate()

    return _wait
