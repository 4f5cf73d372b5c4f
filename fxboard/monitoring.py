"""Timing logs for slow operations such as history builds."""

from __future__ import annotations

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from time import perf_counter
from typing import Any

from flask import current_app

from fxboard.logging import current_request_id


@contextmanager
def timed_operation(
    event: str,
    *,
    logger: logging.Logger | None = None,
    **fields: Any,
) -> Iterator[dict[str, Any]]:
    """Time a block and log it with ``fields`` plus whatever the block adds.

    The yielded dict is the log record under construction; callers put the
    outcome of the operation in it (for history builds, ``cells`` and
    ``missing_points``). The line is written when ``TIMING_LOGS_ENABLED`` is
    set or the block took at least ``TIMING_MIN_DURATION_MS``.
    """

    config = current_app.config
    logger = logger or current_app.logger
    record: dict[str, Any] = {"event": event, "request_id": current_request_id(), **fields}
    start = perf_counter()
    try:
        yield record
    except Exception as exc:
        record["status"] = "error"
        record["error"] = str(exc)
        raise
    finally:
        duration_ms = (perf_counter() - start) * 1000
        threshold = config.get("TIMING_MIN_DURATION_MS")
        slow = threshold is not None and duration_ms >= threshold
        if config.get("TIMING_LOGS_ENABLED") or slow:
            record.setdefault("status", "success")
            record["duration_ms"] = round(duration_ms, 3)
            level = logging.WARNING if record["status"] == "error" or slow else logging.INFO
            logger.log(level, "%s took %.1f ms", event, duration_ms, extra=record)
