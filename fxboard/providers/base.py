"""Abstract interface for FX rate providers."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import date

from .schemas import RateMapping


class FetchFailed(Exception):
    """Raised when one provider round trip cannot produce a rate mapping.

    Covers connection errors, non-success statuses, unparsable bodies and
    responses without a ``rates`` object. The message is the human-readable
    cause and is safe to show to end users.
    """

    def __init__(self, cause: str) -> None:
        super().__init__(cause)
        self.cause = cause


class BaseRateProvider(ABC):
    """Defines the interface all FX rate providers must implement."""

    name: str

    @abstractmethod
    def get_rates(self, base: str, on: date | None = None) -> RateMapping:
        """Return rates relative to ``base``, for day ``on`` or the latest day."""
