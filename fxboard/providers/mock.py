"""Mock provider for tests and offline development."""

from __future__ import annotations

from datetime import date
from decimal import Decimal

from fxboard.utils.datetime import utc_today

from .base import BaseRateProvider
from .schemas import RateMapping, normalize_code

# Units of each currency per 1 USD.
_USD_RATES: dict[str, Decimal] = {
    "USD": Decimal("1"),
    "EUR": Decimal("0.92"),
    "GBP": Decimal("0.79"),
    "JPY": Decimal("150.25"),
    "AUD": Decimal("1.52"),
    "CAD": Decimal("1.36"),
    "CHF": Decimal("0.88"),
    "CNY": Decimal("7.24"),
}


class MockRateProvider(BaseRateProvider):
    """Deterministic provider returning synthetic rates.

    Dated rates drift by 0.1% per day into the past so history charts are not
    flat lines.
    """

    name = "mock"

    def get_rates(self, base: str, on: date | None = None) -> RateMapping:
        base_currency = normalize_code(base)
        day = on or utc_today()
        rates: dict[str, Decimal] = {}
        if base_currency in _USD_RATES:
            drift = Decimal(1) + Decimal("0.001") * (utc_today() - day).days
            base_rate = _USD_RATES[base_currency]
            for code, usd_rate in _USD_RATES.items():
                if code == base_currency:
                    continue
                rates[code] = (usd_rate / base_rate * drift).quantize(Decimal("0.000001"))
        return RateMapping(base_currency=base_currency, source=self.name, as_of=day, rates=rates)
