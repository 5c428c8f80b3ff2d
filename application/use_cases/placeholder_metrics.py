from __future__ import annotations

from domain.entities.prices import DeFiMetrics, NFTMetrics
from domain.services.price_jitter import PriceJitter

EXAMPLE_TOTAL_VALUE_LOCKED = 1_000_000_000.0
EXAMPLE_YIELD_FARMING_RATE = 0.05
EXAMPLE_NFT_FLOOR_PRICE = 1.5
EXAMPLE_NFT_TRADING_VOLUME = 500.0
BASE_SCORE = 100.0


class PlaceholderMetrics:
    """Example DeFi and NFT figures; no upstream is queried."""

    def __init__(self, price_jitter: PriceJitter) -> None:
        self.price_jitter = price_jitter

    def defi(self) -> DeFiMetrics:
        return DeFiMetrics(
            total_value_locked=EXAMPLE_TOTAL_VALUE_LOCKED,
            yield_farming_rate=EXAMPLE_YIELD_FARMING_RATE,
            defi_score=self.price_jitter.apply(BASE_SCORE),
        )

    def nft(self) -> NFTMetrics:
        return NFTMetrics(
            floor_price=EXAMPLE_NFT_FLOOR_PRICE,
            trading_volume=EXAMPLE_NFT_TRADING_VOLUME,
            nft_score=self.price_jitter.apply(BASE_SCORE),
        )
