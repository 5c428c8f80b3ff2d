from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime
from typing import Sequence

from domain.entities.candle import Candle
from domain.entities.oracle_token import OracleTokenRecord
from domain.value_objects.timeframe import Timeframe


class CandleProvider(ABC):
    """Abstract service for retrieving exchange klines."""

    @abstractmethod
    def get_latest_candles(
        self, symbol: str, timeframe: Timeframe, end: datetime, limit: int = 1
    ) -> Sequence[Candle]:
        """Fetch up to ``limit`` candles ending at ``end``."""


class SpotPriceProvider(ABC):
    """Abstract service quoting the current USD price of an asset."""

    name: str = "spot"

    @abstractmethod
    def get_spot_price(self, token: str) -> float:
        """Return the USD spot price for ``token``."""


class ChainStatusProvider(ABC):
    @abstractmethod
    def get_latest_block_height(self, rpc_url: str) -> str:
        """Return the latest block height reported by the node at ``rpc_url``."""


class TokenOracleProvider(ABC):
    @abstractmethod
    def get_token_for_block(self, block_height: str, api_key: str) -> OracleTokenRecord:
        """Resolve the oracle token record published for ``block_height``."""


class TokenPriceProvider(ABC):
    @abstractmethod
    def get_token_price(self, platform: str, address: str) -> str:
        """Return the market price of the token at ``address`` on ``platform``."""
