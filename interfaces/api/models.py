from pydantic import BaseModel


class AggregatedPriceResponse(BaseModel):
    """Blended price and the three estimates it was computed from."""
    price: float
    binance_price: float
    coingecko_price: float
    cryptocompare_price: float


class DeFiMetricsResponse(BaseModel):
    total_value_locked: float
    yield_farming_rate: float
    defi_score: float


class NFTMetricsResponse(BaseModel):
    floor_price: float
    trading_volume: float
    nft_score: float
