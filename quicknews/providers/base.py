from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, List

from ..models import Article


class BaseProvider(ABC):
    """Abstract base class for headline sources."""

    @abstractmethod
    def fetch(self) -> List[Article]:
        """Return the current headlines, in source order."""

    def close(self) -> None:
        """Release any connections held by the provider."""


ProviderFactory = Callable[[str], BaseProvider]
