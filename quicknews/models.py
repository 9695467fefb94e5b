from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import List, Optional, Union

DESCRIPTION_PLACEHOLDER = "..."


class Endpoint(str, Enum):
    """newsapi.org endpoints, serialised as the path segment."""

    TOP_HEADLINES = "top-headlines"


class Country(str, Enum):
    """Countries accepted by the ``country`` query parameter."""

    IN = "in"


@dataclass(frozen=True, slots=True)
class Article:
    """A single article as returned by the API."""

    title: str
    url: str
    description: Optional[str] = None


@dataclass(slots=True)
class Envelope:
    """Decoded top-level response body."""

    status: str
    articles: List[Article] = field(default_factory=list)
    code: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == "ok"


@dataclass(frozen=True, slots=True)
class NewsItem:
    """Display-ready form of an article, delivered over the output channel."""

    title: str
    description: str
    url: str

    @classmethod
    def from_article(cls, article: Article) -> "NewsItem":
        return cls(
            title=article.title,
            description=article.description if article.description is not None else DESCRIPTION_PLACEHOLDER,
            url=article.url,
        )


@dataclass(frozen=True, slots=True)
class SetKey:
    key: str


@dataclass(frozen=True, slots=True)
class Refresh:
    pass


ControlMessage = Union[SetKey, Refresh]
