"""Normalized rate payloads shared by providers and services."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal, InvalidOperation
from typing import Dict, List, Mapping, Optional


def normalize_code(code: str) -> str:
    """Trim and uppercase a currency code."""

    normalized = str(code).strip().upper()
    if not normalized.isascii():
        raise ValueError(f"Currency code must be ASCII: {code!r}")
    return normalized


def _to_decimal(value: object) -> Decimal:
    if isinstance(value, bool) or value is None:
        raise ValueError(f"Rate value must be numeric, got {value!r}")
    try:
        result = Decimal(str(value))
    except InvalidOperation as exc:
        raise ValueError(f"Rate value must be numeric, got {value!r}") from exc
    if not result.is_finite():
        raise ValueError(f"Rate value must be finite, got {value!r}")
    return result


def _normalize_rates(rates: Mapping[str, Decimal | float | int | str]) -> Dict[str, Decimal]:
    normalized: Dict[str, Decimal] = {}
    for code, value in rates.items():
        normalized[normalize_code(code)] = _to_decimal(value)
    return normalized


# One cell of a history series; None where the rate could not be obtained.
RatePoint = Optional[Decimal]
CurrencySeries = Dict[str, List[RatePoint]]


@dataclass(frozen=True)
class RateMapping:
    """Rates for many currencies against one base, as returned by one fetch.

    Currency keys are uppercased on construction. Currencies the provider did
    not report are simply absent.
    """

    base_currency: str
    source: str
    as_of: date | None = None
    rates: Dict[str, Decimal] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "base_currency", normalize_code(self.base_currency))
        object.__setattr__(self, "rates", _normalize_rates(self.rates))
        if not self.source or not self.source.strip():
            raise ValueError("source must be provided for RateMapping")

    def get(self, code: str) -> Decimal | None:
        return self.rates.get(normalize_code(code))
