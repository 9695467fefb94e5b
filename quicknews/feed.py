from __future__ import annotations

import logging
from dataclasses import asdict, replace
from functools import partial
from typing import Callable, List, Optional, Tuple

from .channels import ChannelBridge, ControlSender, NewsReceiver
from .config import NewsConfig
from .models import NewsItem, Refresh, SetKey
from .providers.base import ProviderFactory
from .providers.mock_provider import MockProvider
from .providers.newsapi_provider import NewsAPIProvider
from .worker import NewsWorker

logger = logging.getLogger(__name__)

ConfigSink = Callable[[NewsConfig], None]


class NewsFeed:
    """Display-side state: accumulated headlines plus the user's settings.

    Items from every fetch cycle are appended; nothing is cleared or
    deduplicated between cycles.
    """

    def __init__(
        self,
        control: ControlSender,
        news: NewsReceiver,
        config: Optional[NewsConfig] = None,
        save_config: Optional[ConfigSink] = None,
    ) -> None:
        self._control = control
        self._news = news
        self.config = config or NewsConfig()
        self._save_config = save_config
        self.articles: List[NewsItem] = []
        self.api_key_init = bool(self.config.api_key)

    def preload_articles(self) -> int:
        """Move every item currently waiting in the output channel into ``articles``."""
        items = self._news.drain()
        self.articles.extend(items)
        return len(items)

    def set_api_key(self, api_key: str) -> None:
        api_key = api_key.strip()
        if not api_key:
            raise ValueError("API key must not be empty")
        self.config.api_key = api_key
        self._persist()
        self.api_key_init = True
        self._control.send(SetKey(api_key))
        logger.info("api key set")

    def refresh(self) -> None:
        self._control.send(Refresh())

    def toggle_dark_mode(self) -> bool:
        self.config.dark_mode = not self.config.dark_mode
        self._persist()
        return self.config.dark_mode

    def to_dict(self) -> dict:
        return {
            "api_key_init": self.api_key_init,
            "dark_mode": self.config.dark_mode,
            "articles": [asdict(item) for item in self.articles],
        }

    def _persist(self) -> None:
        if self._save_config is None:
            return
        try:
            self._save_config(replace(self.config))
        except Exception:
            logger.exception("Failed saving app state")


def default_provider_factory(config: NewsConfig) -> ProviderFactory:
    if config.use_mock:
        return MockProvider
    return partial(NewsAPIProvider, base_url=config.base_url, timeout=config.request_timeout)


def start_feed(
    config: NewsConfig,
    provider_factory: Optional[ProviderFactory] = None,
    save_config: Optional[ConfigSink] = None,
) -> Tuple[NewsFeed, NewsWorker]:
    """Wire both channels, start the worker and return it with its consumer."""
    bridge = ChannelBridge.create()
    worker = NewsWorker(
        bridge.control_rx,
        bridge.news_tx,
        api_key=config.api_key,
        provider_factory=provider_factory or default_provider_factory(config),
    )
    feed = NewsFeed(bridge.control_tx, bridge.news_rx, config=config, save_config=save_config)
    worker.start()
    return feed, worker
