"""UTC calendar helpers."""

from __future__ import annotations

from datetime import UTC, date, datetime, timedelta


def utc_now() -> datetime:
    """Return the current UTC datetime."""

    return datetime.now(UTC)


def utc_today() -> date:
    """Return the current UTC calendar day."""

    return utc_now().date()


def trailing_days(count: int, *, end: date | None = None) -> list[date]:
    """Return ``count`` consecutive days ending at ``end``, oldest first."""

    if count <= 0:
        raise ValueError("count must be a positive integer")
    last = end or utc_today()
    return [last - timedelta(days=offset) for offset in range(count - 1, -1, -1)]
