"""ExchangeRate.host provider implementation."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date
from typing import Any

from .base import BaseRateProvider, FetchFailed
from .http_client import HTTPClient, HTTPClientConfig, HTTPClientError
from .schemas import RateMapping, normalize_code
from .utils import mapping_from_payload

DEFAULT_BASE_URL = "https://api.exchangerate.host"


class ExchangeRateHostProvider(BaseRateProvider):
    """Provider that fetches data from ExchangeRate.host."""

    name = "exchange"

    def __init__(self, client: HTTPClient) -> None:
        self._client = client

    @classmethod
    def from_config(cls, config: Mapping[str, Any]) -> ExchangeRateHostProvider:
        base_url_value = config.get("RATES_API_BASE_URL")
        if not isinstance(base_url_value, str) or not base_url_value.strip():
            base_url = DEFAULT_BASE_URL
        else:
            base_url = base_url_value
        timeout = float(config.get("REQUEST_TIMEOUT_SECONDS", 5))
        return cls(HTTPClient(HTTPClientConfig(base_url=base_url, timeout=timeout)))

    def get_rates(self, base: str, on: date | None = None) -> RateMapping:
        base_currency = normalize_code(base)
        path = on.isoformat() if on is not None else "latest"
        try:
            payload = self._client.get(path, params={"base": base_currency})
        except HTTPClientError as exc:
            raise FetchFailed(str(exc)) from exc

        if payload.get("success") is False:
            error_info = payload.get("error") or {}
            raise FetchFailed(f"ExchangeRate.host error payload: {error_info}")

        return mapping_from_payload(payload, base=base_currency, source=self.name)
