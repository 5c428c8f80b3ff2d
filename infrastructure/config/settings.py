from __future__ import annotations

import logging
import os
from dataclasses import dataclass


def _parse_log_level(value: str | None) -> int:
    if value is None:
        return logging.INFO

    if value.isdigit():
        return int(value)

    normalized = value.upper()
    return logging._nameToLevel.get(normalized, logging.INFO)


def _optional_env(name: str) -> str | None:
    value = os.getenv(name)
    if value is None or not value.strip():
        return None
    return value.strip()


def _mask(value: str | None) -> str:
    if not value:
        return "<missing>"
    if len(value) <= 4:
        return "****"
    return f"{value[:2]}****{value[-2:]}"


@dataclass(frozen=True)
class Settings:
    upshot_api_key: str | None
    rpc_url: str | None
    coingecko_api_key: str | None
    cryptocompare_api_key: str | None
    log_level: int = logging.INFO

    def describe(self) -> dict[str, str]:
        """Summary safe to log: secrets masked, the RPC URL shown as configured."""
        return {
            "UPSHOT_APIKEY": _mask(self.upshot_api_key),
            "RPC": self.rpc_url or "<missing>",
            "COINGECKO_APIKEY": _mask(self.coingecko_api_key),
            "CRYPTOCOMPARE_APIKEY": _mask(self.cryptocompare_api_key),
        }


def load_settings() -> Settings:
    return Settings(
        upshot_api_key=_optional_env("UPSHOT_APIKEY"),
        rpc_url=_optional_env("RPC"),
        coingecko_api_key=_optional_env("COINGECKO_APIKEY"),
        cryptocompare_api_key=_optional_env("CRYPTOCOMPARE_APIKEY"),
        log_level=_parse_log_level(os.getenv("LOG_LEVEL")),
    )
