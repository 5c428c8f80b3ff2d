from __future__ import annotations

from application.use_cases.aggregate_crypto_price import AggregateCryptoPrice
from application.use_cases.estimate_meme_price import EstimateMemePrice
from application.use_cases.placeholder_metrics import PlaceholderMetrics
from domain.entities.prices import AggregatedPrice, DeFiMetrics, MemePriceEstimate, NFTMetrics


class InferenceController:
    """Controller that coordinates the inference use cases."""

    def __init__(
        self,
        aggregate_crypto_price: AggregateCryptoPrice,
        estimate_meme_price: EstimateMemePrice,
        placeholder_metrics: PlaceholderMetrics,
    ) -> None:
        self.aggregate_crypto_price = aggregate_crypto_price
        self.estimate_meme_price = estimate_meme_price
        self.placeholder_metrics = placeholder_metrics

    def crypto(self, token: str) -> AggregatedPrice:
        return self.aggregate_crypto_price.execute(token)

    def meme(self) -> MemePriceEstimate:
        return self.estimate_meme_price.execute()

    def defi(self) -> DeFiMetrics:
        return self.placeholder_metrics.defi()

    def nft(self) -> NFTMetrics:
        return self.placeholder_metrics.nft()
