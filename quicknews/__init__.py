"""QuickNews: newsapi.org headlines streamed from a background worker."""

from .config import NewsConfig
from .feed import NewsFeed, start_feed
from .models import Article, Country, Endpoint, NewsItem, Refresh, SetKey
from .providers.newsapi_provider import NewsAPIProvider
from .worker import NewsWorker

__all__ = [
    "Article",
    "Country",
    "Endpoint",
    "NewsAPIProvider",
    "NewsConfig",
    "NewsFeed",
    "NewsItem",
    "NewsWorker",
    "Refresh",
    "SetKey",
    "start_feed",
]
