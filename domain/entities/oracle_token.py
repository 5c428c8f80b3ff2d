from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class OracleTokenRecord:
    """Token the oracle selected for a given block height."""

    token_id: str
    token_symbol: str
    platform: str
    address: str
    request_id: str = ""
    status: bool = False
