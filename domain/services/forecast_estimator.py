"""
Forecast estimator.

Turns the latest candle into a perturbed short-term price projection. This is
a noise-injected heuristic, not a statistical forecast: the observed change
rate is amplified by a random multiplier drawn from [0.1, 0.9) and projected
forward from the close.
"""

from __future__ import annotations

import math
from decimal import Decimal, InvalidOperation

from domain.entities.candle import Candle
from domain.entities.forecast import ForecastResult
from domain.exceptions.errors import ForecastError, PriceParseError, ZeroOpenPriceError
from domain.services.randomness import RandomSource, TimeSeededRandomSource

MIN_MULTIPLIER = 0.1
MULTIPLIER_SPAN = 0.8


def _parse_price(field: str, value: str) -> float:
    try:
        price = float(Decimal(value))
    except (InvalidOperation, TypeError, ValueError) as exc:
        raise PriceParseError(f"Invalid {field} price: {value!r}") from exc
    if not math.isfinite(price):
        raise PriceParseError(f"Price out of range for a float: {field}={value!r}")
    return price


def _require_finite(name: str, value: float) -> float:
    if not math.isfinite(value):
        raise ForecastError(f"{name} is not finite")
    return value


class ForecastEstimator:
    """Projects a candle's close forward by a randomly scaled change rate."""

    def __init__(self, random_source: RandomSource | None = None) -> None:
        self.random_source = random_source or TimeSeededRandomSource()

    def change_rate(self, candle: Candle) -> float:
        open_price = _parse_price("open", candle.open)
        close_price = _parse_price("close", candle.close)
        if open_price == 0:
            raise ZeroOpenPriceError("Open price cannot be zero")
        return _require_finite("Change rate", (close_price - open_price) / open_price)

    def multiplier(self) -> float:
        return MIN_MULTIPLIER + self.random_source.uniform() * MULTIPLIER_SPAN

    def adjust_rate(self, change_rate: float) -> float:
        return change_rate * self.multiplier() + change_rate

    def estimate(self, candle: Candle) -> ForecastResult:
        change_rate = self.change_rate(candle)
        adjusted_rate = self.adjust_rate(change_rate)
        close_price = _parse_price("close", candle.close)
        return ForecastResult(
            change_rate=change_rate,
            adjusted_rate=adjusted_rate,
            price=_require_finite("Projected price", close_price + close_price * adjusted_rate),
        )
