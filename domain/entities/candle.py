from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime

from domain.value_objects.timeframe import Timeframe


@dataclass(frozen=True)
class Candle:
    """Represents one OHLCV kline for a trading pair and interval.

    Prices and volume are kept as the decimal strings the exchange returned;
    parsing happens where the numbers are used.
    """

    symbol: str
    timeframe: Timeframe
    open_time: datetime
    close_time: datetime | None
    open: str
    high: str
    low: str
    close: str
    volume: str
    closed: bool = False
