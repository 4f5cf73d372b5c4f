"""Multi-currency rate history built from independent per-day fetches."""

from __future__ import annotations

import logging
from collections.abc import Callable, Sequence
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass, field
from datetime import date

from fxboard.providers import CurrencySeries, FetchFailed, RatePoint
from fxboard.utils.datetime import trailing_days, utc_today

from .rate_fetcher import RateFetcher

logger = logging.getLogger(__name__)

class InvalidBase(ValueError):
    """Raised when the requested base currency is missing or malformed."""


@dataclass(frozen=True)
class HistoryResult:
    base: str
    success: bool
    series: CurrencySeries = field(default_factory=dict)
    dates: list[date] = field(default_factory=list)
    message: str | None = None

    @property
    def missing_points(self) -> int:
        return sum(1 for points in self.series.values() for point in points if point is None)

    def log_fields(self) -> dict[str, object]:
        """Outcome fields for the timing log of a build."""

        return {
            "base": self.base,
            "status": "success" if self.success else "invalid_base",
            "days": len(self.dates),
            "cells": sum(len(points) for points in self.series.values()),
            "missing_points": self.missing_points,
        }


def normalize_base(value: str | None) -> str:
    """Return ``value`` as an uppercase three-letter code.

    Raises:
        InvalidBase: If the value is blank or not a three-letter code.
    """

    normalized = (value or "").strip().upper()
    if not normalized:
        raise InvalidBase("Base currency is required.")
    if len(normalized) != 3 or not (normalized.isascii() and normalized.isalpha()):
        raise InvalidBase(f"Invalid base currency '{normalized}'. Use a 3-letter ISO 4217 code.")
    return normalized


class HistoryBuilder:
    """Build aligned per-currency rate series for the trailing days.

    Every (currency, day) cell is fetched on its own. A failed fetch, or a
    currency missing from the answer, leaves ``None`` in that cell only; the
    remaining cells are still attempted. All series have ``window_size``
    points, oldest day first.

    With ``max_workers`` above 1 the cells are fetched on a thread pool and
    reassembled by their (currency, day index) tag.
    """

    def __init__(
        self,
        fetcher: RateFetcher,
        targets: Sequence[str],
        *,
        max_workers: int = 1,
        today: Callable[[], date] = utc_today,
    ) -> None:
        self._fetcher = fetcher
        self._targets = _unique_codes(targets)
        self._max_workers = max(int(max_workers), 1)
        self._today = today

    def build(
        self,
        base: str | None,
        window_size: int,
        targets: Sequence[str] | None = None,
    ) -> HistoryResult:
        if window_size <= 0:
            raise ValueError("window_size must be a positive integer")

        try:
            base_currency = normalize_base(base)
        except InvalidBase as exc:
            return HistoryResult(base=(base or "").strip().upper(), success=False, message=str(exc))

        codes = _unique_codes(targets) if targets is not None else list(self._targets)
        days = trailing_days(window_size, end=self._today())
        cells = [(code, index) for code in codes for index in range(window_size)]

        if self._max_workers > 1 and len(cells) > 1:
            points = self._collect_concurrently(base_currency, days, cells)
        else:
            points = {
                (code, index): self.attempt(base_currency, code, days[index])
                for code, index in cells
            }

        series: CurrencySeries = {
            code: [points[(code, index)] for index in range(window_size)] for code in codes
        }
        result = HistoryResult(base=base_currency, success=True, series=series, dates=days)
        if result.missing_points:
            logger.info(
                "History for %s built with %s of %s points missing",
                base_currency,
                result.missing_points,
                len(cells),
                extra={"event": "history.gaps", **result.log_fields()},
            )
        return result

    def attempt(self, base: str, currency: str, day: date) -> RatePoint:
        """Fetch one cell; any provider failure yields ``None``."""

        try:
            mapping = self._fetcher.fetch(base, day)
        except FetchFailed:
            return None
        return mapping.get(currency)

    def _collect_concurrently(
        self,
        base: str,
        days: list[date],
        cells: list[tuple[str, int]],
    ) -> dict[tuple[str, int], RatePoint]:
        workers = min(self._max_workers, len(cells))
        with ThreadPoolExecutor(max_workers=workers, thread_name_prefix="history") as pool:
            futures = {
                cell: pool.submit(self.attempt, base, cell[0], days[cell[1]]) for cell in cells
            }
            return {cell: future.result() for cell, future in futures.items()}


def _unique_codes(codes: Sequence[str]) -> list[str]:
    ordered: list[str] = []
    for code in codes:
        normalized = str(code).strip().upper()
        if normalized and normalized not in ordered:
            ordered.append(normalized)
    return ordered


def init_history_builder(app) -> HistoryBuilder:
    """Create the history builder from app settings and store it on the app."""

    fetcher: RateFetcher = app.extensions["rate_fetcher"]
    builder = HistoryBuilder(
        fetcher,
        parse_codes(app.config.get("HISTORY_TARGET_CURRENCIES", "")),
        max_workers=int(app.config.get("HISTORY_MAX_WORKERS", 1)),
    )
    app.extensions["history_builder"] = builder
    return builder


def parse_codes(raw: str | Sequence[str]) -> list[str]:
    """Split a comma separated setting into normalized currency codes."""

    items = raw.split(",") if isinstance(raw, str) else list(raw)
    return _unique_codes(items)
