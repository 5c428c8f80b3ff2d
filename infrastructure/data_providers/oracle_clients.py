"""Clients used by the meme oracle pipeline.

Like the spot-price clients, these decode the body without checking the
HTTP status.
"""

from __future__ import annotations

from typing import Any

from domain.entities.oracle_token import OracleTokenRecord
from domain.exceptions.errors import DataProviderError
from domain.services.market_data_service import (
    ChainStatusProvider,
    TokenOracleProvider,
    TokenPriceProvider,
)
from infrastructure.data_providers.http_session import UrlLibSession, decode_json

JSON_HEADERS = {"accept": "application/json"}


def _require_str(payload: Any, path: tuple[Any, ...], provider: str) -> str:
    value = payload
    try:
        for key in path:
            value = value[key]
    except (KeyError, TypeError) as exc:
        dotted = ".".join(str(key) for key in path)
        raise DataProviderError(f"{provider} payload is missing {dotted}") from exc
    if not isinstance(value, str):
        dotted = ".".join(str(key) for key in path)
        raise DataProviderError(f"{provider} field {dotted} is not a string: {value!r}")
    return value


class NodeStatusClient(ChainStatusProvider):
    """Reads the latest block height from a node's ``/status`` endpoint."""

    def __init__(self, session: UrlLibSession | None = None) -> None:
        self.session = session or UrlLibSession()

    def get_latest_block_height(self, rpc_url: str) -> str:
        response = self.session.get(f"{rpc_url.rstrip('/')}/status")
        payload = decode_json(response, "Node status")
        return _require_str(payload, ("result", "sync_info", "latest_block_height"), "Node status")


class UpshotOracleClient(TokenOracleProvider):
    """Resolves the oracle token published for a block height."""

    def __init__(
        self,
        base_url: str = "https://api.upshot.xyz",
        session: UrlLibSession | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.session = session or UrlLibSession()

    def get_token_for_block(self, block_height: str, api_key: str) -> OracleTokenRecord:
        headers = {**JSON_HEADERS, "x-api-key": api_key}
        response = self.session.get(
            f"{self.base_url}/v2/allora/tokens-oracle/token/{block_height}",
            headers=headers,
        )
        payload = decode_json(response, "Upshot")

        return OracleTokenRecord(
            token_id=_require_str(payload, ("data", "token_id"), "Upshot"),
            token_symbol=_require_str(payload, ("data", "token_symbol"), "Upshot"),
            platform=_require_str(payload, ("data", "platform"), "Upshot"),
            address=_require_str(payload, ("data", "address"), "Upshot"),
            request_id=str(payload.get("request_id", "")),
            status=bool(payload.get("status", False)),
        )


class GeckoTerminalClient(TokenPriceProvider):
    """Quotes a token by network and contract address."""

    def __init__(
        self,
        base_url: str = "https://api.geckoterminal.com",
        session: UrlLibSession | None = None,
    ) -> None:
        self.base_url = base_url.rstrip("/")
        self.session = session or UrlLibSession()

    def get_token_price(self, platform: str, address: str) -> str:
        response = self.session.get(
            f"{self.base_url}/api/v2/simple/networks/{platform}/token_price/{address}",
            headers=JSON_HEADERS,
        )
        payload = decode_json(response, "GeckoTerminal")
        return _require_str(
            payload, ("data", "attributes", "token_prices", address), "GeckoTerminal"
        )
