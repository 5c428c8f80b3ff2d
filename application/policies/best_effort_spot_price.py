from __future__ import annotations

from dataclasses import dataclass

from domain.exceptions.errors import DomainError
from domain.services.market_data_service import SpotPriceProvider
from infrastructure.storage.logging.logger import get_component_logger

logger = get_component_logger("spot_price")


@dataclass(frozen=True)
class SpotPriceQuote:
    """Outcome of a best-effort lookup; ``price`` is None when the fetch failed."""

    provider: str
    price: float | None
    error: str | None = None

    @property
    def failed(self) -> bool:
        return self.price is None

    def value_or_zero(self) -> float:
        return 0.0 if self.price is None else self.price


class BestEffortSpotPricePolicy:
    """Queries a spot-price provider without letting its failure abort the caller.

    A failed fetch is logged and reported as a quote with no price. Callers
    that substitute zero for it skew any average they feed it into.
    """

    def __init__(self, provider: SpotPriceProvider) -> None:
        self.provider = provider

    def quote(self, token: str) -> SpotPriceQuote:
        try:
            price = self.provider.get_spot_price(token)
        except (DomainError, ValueError) as exc:
            logger.warning("%s spot price unavailable for %s: %s", self.provider.name, token, exc)
            return SpotPriceQuote(provider=self.provider.name, price=None, error=str(exc))
        return SpotPriceQuote(provider=self.provider.name, price=price)
