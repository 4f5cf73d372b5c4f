"""Provider interfaces and adapters for remote FX rate sources."""

from .base import BaseRateProvider, FetchFailed
from .exchangerate_provider import ExchangeRateHostProvider
from .frankfurter_provider import FrankfurterProvider
from .http_client import HTTPClient, HTTPClientConfig, HTTPClientError
from .mock import MockRateProvider
from .schemas import CurrencySeries, RateMapping, RatePoint, normalize_code

__all__ = [
    "BaseRateProvider",
    "CurrencySeries",
    "ExchangeRateHostProvider",
    "FetchFailed",
    "FrankfurterProvider",
    "HTTPClient",
    "HTTPClientConfig",
    "HTTPClientError",
    "MockRateProvider",
    "RateMapping",
    "RatePoint",
    "normalize_code",
]
