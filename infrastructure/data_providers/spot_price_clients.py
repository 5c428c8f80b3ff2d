"""Generic spot-price providers.

Neither client checks the HTTP status: whatever body comes back is decoded
and must carry the expected price field.
"""

from __future__ import annotations

from typing import Any

from domain.exceptions.errors import DataProviderError
from domain.services.market_data_service import SpotPriceProvider
from infrastructure.data_providers.http_session import UrlLibSession, decode_json


def _as_price(value: Any, provider: str, field: str) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise DataProviderError(f"{provider} field {field!r} is not a number: {value!r}")
    return float(value)


class CoinGeckoClient(SpotPriceProvider):
    name = "coingecko"

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str = "https://api.coingecko.com",
        session: UrlLibSession | None = None,
    ) -> None:
        self.api_key = api_key or ""
        self.base_url = base_url.rstrip("/")
        self.session = session or UrlLibSession()

    def get_spot_price(self, token: str) -> float:
        if not token:
            raise ValueError("Token must not be empty")

        params = {
            "ids": token,
            "vs_currencies": "usd",
            "x_cg_demo_api_key": self.api_key,
        }
        response = self.session.get(f"{self.base_url}/api/v3/simple/price", params=params)
        payload = decode_json(response, "CoinGecko")

        try:
            value = payload[token]["usd"]
        except (KeyError, TypeError) as exc:
            raise DataProviderError(f"CoinGecko payload has no USD price for {token}") from exc
        return _as_price(value, "CoinGecko", "usd")


class CryptoCompareClient(SpotPriceProvider):
    name = "cryptocompare"

    def __init__(
        self,
        api_key: str | None = None,
        base_url: str = "https://min-api.cryptocompare.com",
        session: UrlLibSession | None = None,
    ) -> None:
        self.api_key = api_key or ""
        self.base_url = base_url.rstrip("/")
        self.session = session or UrlLibSession()

    def get_spot_price(self, token: str) -> float:
        if not token:
            raise ValueError("Token must not be empty")

        params = {"fsym": token, "tsyms": "USD", "api_key": self.api_key}
        response = self.session.get(f"{self.base_url}/data/price", params=params)
        payload = decode_json(response, "CryptoCompare")

        try:
            value = payload["USD"]
        except (KeyError, TypeError) as exc:
            raise DataProviderError(f"CryptoCompare payload has no USD price for {token}") from exc
        return _as_price(value, "CryptoCompare", "USD")
