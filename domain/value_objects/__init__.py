from .inference_topic import InferenceTopic
from .timeframe import Timeframe, TradingPair

__all__ = [
    "InferenceTopic",
    "Timeframe",
    "TradingPair",
]
