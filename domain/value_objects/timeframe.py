from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Timeframe(str, Enum):
    ONE_MINUTE = "1m"
    FIVE_MINUTES = "5m"
    FIFTEEN_MINUTES = "15m"
    THIRTY_MINUTES = "30m"
    ONE_HOUR = "1h"
    FOUR_HOURS = "4h"
    ONE_DAY = "1d"

    def to_binance_interval(self) -> str:
        """Return the interval string expected by the Binance klines endpoint."""
        return self.value


@dataclass(frozen=True)
class TradingPair:
    """Exchange symbol built from a base asset and a quote asset."""

    base: str
    quote: str = "USDT"

    def __post_init__(self) -> None:
        if not self.base:
            raise ValueError("Trading pair base asset must not be empty")

    def __str__(self) -> str:
        return f"{self.base}{self.quote}"
