"""Helpers turning raw provider payloads into ``RateMapping`` objects."""

from __future__ import annotations

from collections.abc import Mapping
from datetime import date
from typing import Any

from .base import FetchFailed
from .schemas import RateMapping


def mapping_from_payload(payload: Mapping[str, Any], *, base: str, source: str) -> RateMapping:
    """Extract the ``rates`` object of a provider response.

    Raises:
        FetchFailed: If ``rates`` is absent, is not an object, or holds values
            that cannot be read as numbers.
    """

    rates = payload.get("rates")
    if rates is None:
        raise FetchFailed(f"Response from {source} is missing the 'rates' field")
    if not isinstance(rates, Mapping):
        raise FetchFailed(f"Response from {source} has a malformed 'rates' field")

    try:
        return RateMapping(
            base_currency=base,
            source=source,
            as_of=parse_as_of(payload.get("date")),
            rates=rates,
        )
    except ValueError as exc:
        raise FetchFailed(f"Response from {source} contains invalid rates: {exc}") from exc


def parse_as_of(value: Any) -> date | None:
    if not isinstance(value, str) or not value.strip():
        return None
    try:
        return date.fromisoformat(value.strip()[:10])
    except ValueError:
        return None
