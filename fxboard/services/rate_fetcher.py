"""Single-call rate fetching shared by the live view and the history builder."""

from __future__ import annotations

import logging
from datetime import date
from time import perf_counter

from fxboard.logging import fetch_log_fields
from fxboard.providers import BaseRateProvider, FetchFailed, RateMapping, normalize_code
from fxboard.providers.registry import get_provider

logger = logging.getLogger(__name__)


class RateFetcher:
    """Fetch one ``RateMapping`` per call from the configured provider.

    Each call is exactly one provider round trip. Failures are raised as
    ``FetchFailed`` and never retried here.
    """

    def __init__(self, provider: BaseRateProvider) -> None:
        self._provider = provider

    @property
    def provider_name(self) -> str:
        return getattr(self._provider, "name", self._provider.__class__.__name__)

    def fetch(self, base: str, on: date | None = None) -> RateMapping:
        try:
            base_currency = normalize_code(base)
        except ValueError as exc:
            raise FetchFailed(str(exc)) from exc
        if not base_currency:
            raise FetchFailed("Base currency cannot be empty.")

        start = perf_counter()
        try:
            mapping = self._provider.get_rates(base_currency, on)
        except FetchFailed as exc:
            logger.warning(
                "Provider fetch failed: %s",
                exc.cause,
                extra=fetch_log_fields(
                    provider=self.provider_name,
                    base=base_currency,
                    status="error",
                    duration_ms=(perf_counter() - start) * 1000,
                    as_of=on,
                    error=exc.cause,
                ),
            )
            raise

        logger.debug(
            "Provider fetch succeeded",
            extra=fetch_log_fields(
                provider=self.provider_name,
                base=base_currency,
                status="success",
                duration_ms=(perf_counter() - start) * 1000,
                as_of=mapping.as_of or on,
            ),
        )
        return mapping


def init_rate_fetcher(app) -> RateFetcher:
    """Create a fetcher around the app's provider and store it on the app."""

    provider = app.extensions.get("rate_provider")
    if provider is None:
        provider = get_provider(app.config.get("FX_RATE_PROVIDER"), app.config)
    fetcher = RateFetcher(provider)
    app.extensions["rate_fetcher"] = fetcher
    return fetcher
