from __future__ import annotations

import json
from http.client import HTTPException
from typing import Any, Dict, Mapping
from urllib.error import HTTPError, URLError
from urllib.parse import urlencode
from urllib.request import Request, urlopen

from domain.exceptions.errors import DataProviderError


class SimpleResponse:
    def __init__(self, status_code: int, text: str) -> None:
        self.status_code = status_code
        self.text = text

    def json(self) -> Any:
        return json.loads(self.text)


class UrlLibSession:
    """Lightweight HTTP client using the standard library.

    Non-2xx responses come back as responses. Transport failures, truncated
    bodies and bodies that are not UTF-8 raise ``DataProviderError``.
    """

    def get(
        self,
        url: str,
        params: Dict[str, Any] | None = None,
        headers: Mapping[str, str] | None = None,
        timeout: float | None = None,
    ) -> SimpleResponse:
        query = urlencode(params or {})
        full_url = f"{url}?{query}" if query else url
        request = Request(full_url, headers=dict(headers or {}))
        try:
            status, body = self._fetch(request, timeout)
        except (URLError, OSError, HTTPException) as exc:
            reason = getattr(exc, "reason", exc)
            raise DataProviderError(f"Network error contacting {full_url}: {reason!r}") from exc

        try:
            text = body.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise DataProviderError(f"Response from {full_url} is not valid UTF-8") from exc
        return SimpleResponse(status_code=status, text=text)

    def _fetch(self, request: Request, timeout: float | None) -> tuple[int, bytes]:
        try:
            with urlopen(request, timeout=timeout) as response:
                return response.getcode(), response.read()
        except HTTPError as exc:
            return exc.code, exc.read()


def decode_json(response: SimpleResponse, provider: str) -> Any:
    try:
        return response.json()
    except ValueError as exc:
        raise DataProviderError(
            f"{provider} returned a body that is not valid JSON (HTTP {response.status_code})"
        ) from exc
