from __future__ import annotations

from dataclasses import dataclass

from domain.entities.oracle_token import OracleTokenRecord


@dataclass(frozen=True)
class AggregatedPrice:
    """Blended price together with the three contributing estimates."""

    price: float
    binance_price: float
    coingecko_price: float
    cryptocompare_price: float


@dataclass(frozen=True)
class MemePriceEstimate:
    block_height: str
    token: OracleTokenRecord
    market_price: float
    price: float


@dataclass(frozen=True)
class DeFiMetrics:
    total_value_locked: float
    yield_farming_rate: float
    defi_score: float


@dataclass(frozen=True)
class NFTMetrics:
    floor_price: float
    trading_volume: float
    nft_score: float
