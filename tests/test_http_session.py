from __future__ import annotations

import io
from http.client import IncompleteRead
from urllib.error import HTTPError, URLError

import pytest

from application.policies.best_effort_spot_price import BestEffortSpotPricePolicy
from application.use_cases.estimate_meme_price import EstimateMemePrice
from domain.entities.oracle_token import OracleTokenRecord
from domain.exceptions.errors import DataProviderError, MemePipelineError
from domain.services.market_data_service import TokenOracleProvider, TokenPriceProvider
from domain.services.price_jitter import PriceJitter
from domain.services.randomness import RandomSource
from infrastructure.data_providers import http_session
from infrastructure.data_providers.http_session import SimpleResponse, UrlLibSession, decode_json
from infrastructure.data_providers.oracle_clients import NodeStatusClient
from infrastructure.data_providers.spot_price_clients import CryptoCompareClient


class FakeUrlResponse:
    def __init__(self, body: bytes = b"", status: int = 200, error: Exception | None = None) -> None:
        self.body = body
        self.status = status
        self.error = error

    def __enter__(self) -> "FakeUrlResponse":
        return self

    def __exit__(self, *exc_info) -> None:
        return None

    def getcode(self) -> int:
        return self.status

    def read(self) -> bytes:
        if self.error:
            raise self.error
        return self.body


class FakeUrlOpen:
    def __init__(self, result) -> None:
        self.result = result
        self.requests: list = []
        self.timeouts: list = []

    def __call__(self, request, timeout=None):
        self.requests.append(request)
        self.timeouts.append(timeout)
        if isinstance(self.result, Exception):
            raise self.result
        return self.result


def install(monkeypatch, result) -> FakeUrlOpen:
    fake = FakeUrlOpen(result)
    monkeypatch.setattr(http_session, "urlopen", fake)
    return fake


def test_get_returns_body_and_forwards_query_and_headers(monkeypatch) -> None:
    fake = install(monkeypatch, FakeUrlResponse(b'{"USD": 1.5}'))

    response = UrlLibSession().get(
        "http://mock/data/price",
        params={"fsym": "ETH", "tsyms": "USD"},
        headers={"x-api-key": "secret"},
        timeout=5,
    )

    assert response.status_code == 200
    assert response.json() == {"USD": 1.5}
    request = fake.requests[0]
    assert request.full_url == "http://mock/data/price?fsym=ETH&tsyms=USD"
    assert request.get_header("X-api-key") == "secret"
    assert fake.timeouts == [5]


def test_get_returns_non_2xx_responses(monkeypatch) -> None:
    error = HTTPError(
        "http://mock/status", 503, "Service Unavailable", hdrs=None, fp=io.BytesIO(b'{"error": "busy"}')
    )
    install(monkeypatch, error)

    response = UrlLibSession().get("http://mock/status")

    assert response.status_code == 503
    assert response.json() == {"error": "busy"}


def test_get_wraps_connection_errors(monkeypatch) -> None:
    install(monkeypatch, URLError("connection refused"))

    with pytest.raises(DataProviderError, match="connection refused"):
        UrlLibSession().get("http://mock/status")


def test_get_wraps_truncated_body(monkeypatch) -> None:
    install(monkeypatch, FakeUrlResponse(error=IncompleteRead(b"{\"USD\"", 94)))

    with pytest.raises(DataProviderError, match="IncompleteRead"):
        UrlLibSession().get("http://mock/data/price")


def test_get_wraps_invalid_utf8(monkeypatch) -> None:
    install(monkeypatch, FakeUrlResponse(b"\xff\xfe"))

    with pytest.raises(DataProviderError, match="UTF-8"):
        UrlLibSession().get("http://mock/status")


def test_decode_json_rejects_malformed_body() -> None:
    with pytest.raises(DataProviderError, match="HTTP 200"):
        decode_json(SimpleResponse(status_code=200, text="<html>"), "CryptoCompare")


def test_truncated_spot_price_body_counts_as_failed_quote(monkeypatch) -> None:
    install(monkeypatch, FakeUrlResponse(error=IncompleteRead(b"{\"USD\"", 94)))
    policy = BestEffortSpotPricePolicy(CryptoCompareClient(base_url="http://mock"))

    quote = policy.quote("ETH")

    assert quote.failed
    assert quote.value_or_zero() == 0.0


class _FixedRandomSource(RandomSource):
    def uniform(self) -> float:
        return 0.5


class _UnusedOracle(TokenOracleProvider):
    def get_token_for_block(self, block_height: str, api_key: str) -> OracleTokenRecord:
        raise AssertionError("oracle must not be queried")


class _UnusedPrice(TokenPriceProvider):
    def get_token_price(self, platform: str, address: str) -> str:
        raise AssertionError("price must not be queried")


def test_undecodable_node_status_fails_latest_block_stage(monkeypatch) -> None:
    install(monkeypatch, FakeUrlResponse(b"\xff\xfe"))
    use_case = EstimateMemePrice(
        chain_status=NodeStatusClient(),
        token_oracle=_UnusedOracle(),
        token_price=_UnusedPrice(),
        price_jitter=PriceJitter(_FixedRandomSource()),
        api_key="key",
        rpc_url="http://node",
    )

    with pytest.raises(MemePipelineError) as excinfo:
        use_case.execute()

    assert excinfo.value.stage == MemePipelineError.LATEST_BLOCK
