from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Sequence

from domain.entities.candle import Candle
from domain.exceptions.errors import DataProviderError, EmptyCandleSetError
from domain.services.market_data_service import CandleProvider
from domain.value_objects.timeframe import Timeframe
from infrastructure.data_providers.http_session import UrlLibSession, decode_json


def _from_millis(value: Any) -> datetime:
    return datetime.fromtimestamp(int(value) / 1000, tz=timezone.utc)


class BinanceClient(CandleProvider):
    """Candle provider backed by the Binance public klines endpoint."""

    def __init__(
        self,
        base_url: str = "https://api.binance.com",
        session: UrlLibSession | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.session = session or UrlLibSession()

    def get_latest_candles(
        self, symbol: str, timeframe: Timeframe, end: datetime, limit: int = 1
    ) -> Sequence[Candle]:
        if not symbol:
            raise ValueError("Symbol must not be empty")
        if end.tzinfo is None:
            end = end.replace(tzinfo=timezone.utc)

        params = {
            "endTime": int(end.timestamp() * 1000),
            "limit": limit,
            "symbol": symbol,
            "interval": timeframe.to_binance_interval(),
        }
        response = self.session.get(f"{self.base_url}/api/v1/klines", params=params)
        if response.status_code != 200:
            raise DataProviderError(
                f"Binance returned HTTP {response.status_code}: {response.text}"
            )

        rows = decode_json(response, "Binance")
        if not isinstance(rows, list):
            raise DataProviderError("Unexpected Binance payload; expected a list of klines")
        if not rows:
            raise EmptyCandleSetError(f"No klines returned for {symbol} {timeframe.value}")

        return [self._build_candle(symbol, timeframe, row, end) for row in rows]

    def _build_candle(
        self, symbol: str, timeframe: Timeframe, row: Any, end: datetime
    ) -> Candle:
        # [open_time, open, high, low, close, volume, close_time, ...]
        try:
            open_time = _from_millis(row[0])
            close_time = _from_millis(row[6]) if len(row) > 6 else None
            prices = [row[index] for index in range(1, 6)]
        except (IndexError, KeyError, TypeError, ValueError) as exc:
            raise DataProviderError(f"Invalid kline row from Binance: {row}") from exc

        if not all(isinstance(value, str) for value in prices):
            raise DataProviderError(f"Invalid kline row from Binance: {row}")

        open_price, high, low, close, volume = prices
        return Candle(
            symbol=symbol,
            timeframe=timeframe,
            open_time=open_time,
            close_time=close_time,
            open=open_price,
            high=high,
            low=low,
            close=close,
            volume=volume,
            closed=close_time is not None and close_time < end,
        )
