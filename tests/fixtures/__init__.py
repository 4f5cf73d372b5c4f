"""Test fixture helpers."""

from __future__ import annotations

import json
from datetime import date
from decimal import Decimal
from pathlib import Path
from typing import Any, Callable, cast

from fxboard.providers import BaseRateProvider, FetchFailed, RateMapping

_FIXTURE_ROOT = Path(__file__).parent


def load_json(name: str) -> dict[str, Any]:
    """Load a JSON fixture by filename."""

    data = json.loads((_FIXTURE_ROOT / name).read_text())
    if not isinstance(data, dict):
        raise ValueError(f"Fixture '{name}' does not contain a JSON object.")
    return cast(dict[str, Any], data)


class ScriptedProvider(BaseRateProvider):
    """Provider whose answer for each call is decided by a callback.

    The callback receives the zero-based call index, the base and the day and
    returns a rates dict, or an exception instance to raise.
    """

    name = "scripted"

    def __init__(self, script: Callable[[int, str, date | None], Any]) -> None:
        self._script = script
        self.calls: list[tuple[str, date | None]] = []

    def get_rates(self, base: str, on: date | None = None) -> RateMapping:
        index = len(self.calls)
        self.calls.append((base, on))
        outcome = self._script(index, base, on)
        if isinstance(outcome, Exception):
            raise outcome
        return RateMapping(base_currency=base, source=self.name, as_of=on, rates=outcome)


def constant_rates(rates: dict[str, Any]) -> ScriptedProvider:
    return ScriptedProvider(lambda _index, _base, _on: dict(rates))


def always_failing(cause: str = "provider down") -> ScriptedProvider:
    return ScriptedProvider(lambda _index, _base, _on: FetchFailed(cause))


def rates_by_day(values: dict[date, Decimal]) -> ScriptedProvider:
    """Provider answering ``{"USD": values[day]}`` and failing for unknown days."""

    def _script(_index: int, _base: str, on: date | None):
        if on not in values:
            return FetchFailed(f"no data for {on}")
        return {"USD": values[on]}

    return ScriptedProvider(_script)
