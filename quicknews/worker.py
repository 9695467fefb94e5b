from __future__ import annotations

import logging
import threading
from enum import Enum
from typing import Optional

from .channels import ControlReceiver, NewsSender
from .errors import NewsApiError
from .models import ControlMessage, NewsItem, Refresh, SetKey
from .providers.base import BaseProvider, ProviderFactory
from .providers.newsapi_provider import NewsAPIProvider

logger = logging.getLogger(__name__)


class WorkerState(str, Enum):
    AWAITING_KEY = "awaiting_key"
    FETCHING = "fetching"
    IDLE = "idle"


class NewsWorker:
    """Background thread that fetches headlines on startup, on a new key and on refresh.

    Every fetch cycle either pushes all of its items to the output channel, in
    server order, or pushes nothing and is logged. Failed cycles are never
    retried. The worker keeps one provider for the current key and closes it
    when the key changes. ``stop()`` asks the thread to exit after the current
    cycle; afterwards the control channel refuses new messages.
    """

    def __init__(
        self,
        control: ControlReceiver,
        output: NewsSender,
        api_key: str = "",
        provider_factory: ProviderFactory = NewsAPIProvider,
        poll_interval: float = 0.1,
    ) -> None:
        self._control = control
        self._output = output
        self._api_key = api_key or ""
        self._provider_factory = provider_factory
        self._provider: Optional[BaseProvider] = None
        self._poll_interval = poll_interval
        self._stopping = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self.state = WorkerState.FETCHING if self._api_key else WorkerState.AWAITING_KEY
        self.cycles = 0
        self.failed_cycles = 0

    def start(self) -> "NewsWorker":
        if self._thread is not None:
            raise RuntimeError("NewsWorker already started")
        self._thread = threading.Thread(target=self.run, name="quicknews-worker", daemon=True)
        self._thread.start()
        return self

    def stop(self, timeout: Optional[float] = None) -> None:
        self._stopping.set()
        if self._thread is None:
            self._control.close()
            return
        if self._thread is not threading.current_thread():
            self._thread.join(timeout)

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def run(self) -> None:
        if self.state is WorkerState.FETCHING:
            self._fetch_cycle()
            self.state = WorkerState.IDLE
        while not self._stopping.is_set():
            message = self._control.receive(timeout=self._poll_interval)
            if message is None:
                continue
            try:
                self.handle(message)
            finally:
                self._control.done()
        self._control.close()
        self._close_provider()
        logger.debug("news worker stopped")

    def handle(self, message: ControlMessage) -> None:
        if isinstance(message, SetKey):
            if not message.key:
                logger.info("ignoring empty API key")
                return
            if message.key != self._api_key:
                self._close_provider()
            self._api_key = message.key
            self.state = WorkerState.FETCHING
            self._fetch_cycle()
            self.state = WorkerState.IDLE
        elif isinstance(message, Refresh):
            if self.state is WorkerState.AWAITING_KEY:
                logger.info("refresh requested before an API key was set; nothing to fetch")
                return
            self.state = WorkerState.FETCHING
            self._fetch_cycle()
            self.state = WorkerState.IDLE
        else:
            logger.warning("unsupported control message: %r", message)

    def _fetch_cycle(self) -> int:
        self.cycles += 1
        try:
            if self._provider is None:
                self._provider = self._provider_factory(self._api_key)
            articles = self._provider.fetch()
        except NewsApiError as exc:
            logger.error("news fetching failed: %s", exc)
            self.failed_cycles += 1
            return 0
        except Exception:
            logger.exception("news fetching failed unexpectedly")
            self.failed_cycles += 1
            return 0
        for article in articles:
            self._output.send(NewsItem.from_article(article))
        logger.debug("fetch cycle %d delivered %d items", self.cycles, len(articles))
        return len(articles)

    def _close_provider(self) -> None:
        if self._provider is not None:
            self._provider.close()
            self._provider = None
