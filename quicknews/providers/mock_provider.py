from __future__ import annotations

from typing import List

from ..models import Article
from .base import BaseProvider


class MockProvider(BaseProvider):
    """Returns hard-coded headlines for offline development."""

    def __init__(self, api_key: str = "") -> None:
        self.api_key = api_key

    def fetch(self) -> List[Article]:
        return [
            Article(
                title="Monsoon arrives early over the Kerala coast",
                url="https://example.com/monsoon",
                description="Forecasters expect above-average rainfall through September.",
            ),
            Article(
                title="Markets close higher on strong bank earnings",
                url="https://example.com/markets",
                description="Benchmark indices gained for a third straight session.",
            ),
            Article(
                title="City council approves new metro line",
                url="https://example.com/metro",
                description=None,
            ),
        ]
