"""
Card statistics providers.

No real metrics source exists yet, so gallery cards are decorated with
generated figures. Values change on every request; swap in another
``StatsProvider`` once real numbers are available.
"""

import random
from typing import Optional, Protocol

from app.domain.models import ItemStats, NotionPage


class StatsProvider(Protocol):
    """Anything that can produce stats for a Notion record."""

    def generate(self, page: NotionPage) -> ItemStats:
        ...


class RandomStatsProvider:
    """Generate plausible-looking random stats."""

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._rng = rng or random.Random()

    def generate(self, page: NotionPage) -> ItemStats:
        return ItemStats(
            views=self._rng.randint(10_000, 509_999),
            downloads=self._rng.randint(1, 100),
            rating=round(self._rng.uniform(3.0, 5.0), 1),
        )
