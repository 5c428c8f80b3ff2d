from .candle import Candle
from .forecast import ForecastResult
from .oracle_token import OracleTokenRecord
from .prices import AggregatedPrice, DeFiMetrics, MemePriceEstimate, NFTMetrics

__all__ = [
    "AggregatedPrice",
    "Candle",
    "DeFiMetrics",
    "ForecastResult",
    "MemePriceEstimate",
    "NFTMetrics",
    "OracleTokenRecord",
]
