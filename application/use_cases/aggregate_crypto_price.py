from __future__ import annotations

from datetime import datetime, timezone
from typing import Callable

from application.policies.best_effort_spot_price import BestEffortSpotPricePolicy
from domain.entities.prices import AggregatedPrice
from domain.exceptions.errors import EmptyCandleSetError
from domain.services.forecast_estimator import ForecastEstimator
from domain.services.market_data_service import CandleProvider
from domain.value_objects.timeframe import Timeframe, TradingPair
from infrastructure.storage.logging.logger import get_component_logger

logger = get_component_logger("aggregate")


def _utc_now() -> datetime:
    return datetime.now(timezone.utc)


class AggregateCryptoPrice:
    """Use case blending an exchange forecast with two spot prices."""

    def __init__(
        self,
        candle_provider: CandleProvider,
        forecast_estimator: ForecastEstimator,
        coingecko: BestEffortSpotPricePolicy,
        cryptocompare: BestEffortSpotPricePolicy,
        timeframe: Timeframe = Timeframe.FIFTEEN_MINUTES,
        clock: Callable[[], datetime] = _utc_now,
    ) -> None:
        self.candle_provider = candle_provider
        self.forecast_estimator = forecast_estimator
        self.coingecko = coingecko
        self.cryptocompare = cryptocompare
        self.timeframe = timeframe
        self.clock = clock

    def execute(self, token: str) -> AggregatedPrice:
        """
        Produce the blended price for ``token``.

        Candle and forecast errors propagate. Spot-price failures do not: the
        missing quote counts as zero in the mean.
        """
        pair = TradingPair(base=token)
        candles = self.candle_provider.get_latest_candles(
            symbol=str(pair), timeframe=self.timeframe, end=self.clock(), limit=1
        )
        if not candles:
            raise EmptyCandleSetError(f"No klines returned for {pair}")

        forecast = self.forecast_estimator.estimate(candles[0])

        coingecko_quote = self.coingecko.quote(token)
        cryptocompare_quote = self.cryptocompare.quote(token)

        binance_price = forecast.price
        coingecko_price = coingecko_quote.value_or_zero()
        cryptocompare_price = cryptocompare_quote.value_or_zero()
        blended = blend_prices(binance_price, coingecko_price, cryptocompare_price)

        logger.debug(
            "%s: change_rate=%s binance=%s coingecko=%s cryptocompare=%s price=%s",
            pair,
            forecast.change_rate,
            binance_price,
            coingecko_price,
            cryptocompare_price,
            blended,
        )
        return AggregatedPrice(
            price=blended,
            binance_price=binance_price,
            coingecko_price=coingecko_price,
            cryptocompare_price=cryptocompare_price,
        )


def blend_prices(binance_price: float, coingecko_price: float, cryptocompare_price: float) -> float:
    """Unweighted arithmetic mean of the three estimates."""
    return (binance_price + coingecko_price + cryptocompare_price) / 3
