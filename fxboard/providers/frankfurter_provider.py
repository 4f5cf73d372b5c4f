"""ECB rates via the Frankfurter API."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date
from typing import Any

from .base import BaseRateProvider, FetchFailed
from .http_client import HTTPClient, HTTPClientConfig, HTTPClientError
from .schemas import RateMapping, normalize_code
from .utils import mapping_from_payload

DEFAULT_BASE_URL = "https://api.frankfurter.app"


class FrankfurterProvider(BaseRateProvider):
    """Frankfurter publishes one ECB fixing per working day.

    Dated lookups for weekends and holidays answer with the closest earlier
    fixing, so neighbouring history points may carry the same value.
    """

    name = "frankfurter"

    def __init__(self, client: HTTPClient) -> None:
        self._client = client

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> FrankfurterProvider:
        base_url = str(config.get("FRANKFURTER_API_BASE_URL") or DEFAULT_BASE_URL)
        timeout = float(config.get("REQUEST_TIMEOUT_SECONDS", 5))
        return cls(HTTPClient(HTTPClientConfig(base_url=base_url, timeout=timeout)))

    def get_rates(self, base: str, on: date | None = None) -> RateMapping:
        base_currency = normalize_code(base)
        path = on.isoformat() if on is not None else "latest"
        try:
            payload = self._client.get(path, params={"from": base_currency})
        except HTTPClientError as exc:
            raise FetchFailed(str(exc)) from exc

        if "error" in payload:
            raise FetchFailed(f"Frankfurter API error payload: {payload['error']}")
        if "message" in payload and "rates" not in payload:
            raise FetchFailed(f"Frankfurter API error: {payload['message']}")

        return mapping_from_payload(payload, base=base_currency, source=self.name)
