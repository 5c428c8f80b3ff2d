from __future__ import annotations

from domain.services.randomness import RandomSource, TimeSeededRandomSource

MAX_JITTER_PERCENT = 3.0


class PriceJitter:
    """Moves a price by a uniform random percentage in [-3%, +3%)."""

    def __init__(self, random_source: RandomSource | None = None) -> None:
        self.random_source = random_source or TimeSeededRandomSource()

    def apply(self, price: float) -> float:
        percent = self.random_source.uniform() * 2 * MAX_JITTER_PERCENT - MAX_JITTER_PERCENT
        return price + price * (percent / 100)
