from .forecast_estimator import ForecastEstimator
from .market_data_service import (
    CandleProvider,
    ChainStatusProvider,
    SpotPriceProvider,
    TokenOracleProvider,
    TokenPriceProvider,
)
from .price_jitter import PriceJitter
from .randomness import RandomSource, TimeSeededRandomSource

__all__ = [
    "CandleProvider",
    "ChainStatusProvider",
    "ForecastEstimator",
    "PriceJitter",
    "RandomSource",
    "SpotPriceProvider",
    "TimeSeededRandomSource",
    "TokenOracleProvider",
    "TokenPriceProvider",
]
