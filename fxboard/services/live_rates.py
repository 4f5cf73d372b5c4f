"""Live rates for a fixed base, filtered to the major currencies."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from decimal import ROUND_HALF_UP, Decimal

from fxboard.providers import FetchFailed, normalize_code

from .history import parse_codes
from .rate_fetcher import RateFetcher

FOUR_PLACES = Decimal("0.0001")


@dataclass(frozen=True)
class LiveRatesResult:
    base: str
    text: str
    ok: bool
    rates: list[tuple[str, str]] = field(default_factory=list)


def format_rate(value: Decimal) -> str:
    return str(value.quantize(FOUR_PLACES, rounding=ROUND_HALF_UP))


class LiveRateView:
    """Render the current rates of the configured major currencies.

    Currencies missing from the provider answer are left out rather than shown
    as errors.
    """

    def __init__(self, fetcher: RateFetcher, base: str, symbols: Sequence[str]) -> None:
        self._fetcher = fetcher
        self._base = normalize_code(base)
        self._symbols = parse_codes(symbols)

    @property
    def base(self) -> str:
        return self._base

    def current_rates(self) -> LiveRatesResult:
        try:
            mapping = self._fetcher.fetch(self._base)
        except FetchFailed as exc:
            return LiveRatesResult(
                base=self._base,
                text=f"Failed to fetch exchange rates: {exc.cause}",
                ok=False,
            )

        rates: list[tuple[str, str]] = []
        for code in self._symbols:
            value = mapping.get(code)
            if value is None:
                continue
            rates.append((code, format_rate(value)))

        text = "\n".join(f"{code}: {rate}" for code, rate in rates)
        return LiveRatesResult(base=self._base, text=text, ok=True, rates=rates)


def init_live_rate_view(app) -> LiveRateView:
    """Create the live view from app settings and store it on the app."""

    view = LiveRateView(
        app.extensions["rate_fetcher"],
        base=app.config.get("LIVE_RATES_BASE", "USD"),
        symbols=parse_codes(app.config.get("LIVE_RATES_SYMBOLS", "")),
    )
    app.extensions["live_rate_view"] = view
    return view
