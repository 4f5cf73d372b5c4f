"""Logging setup for the rate board.

Log lines carry a fixed vocabulary of structured fields (``STRUCTURED_FIELDS``)
passed through ``extra=``. The plain formatter ignores them; the JSON formatter
emits them next to the message so request, provider and history lines can be
filtered by ``event``, ``base``, ``as_of`` or ``missing_points``.
"""

from __future__ import annotations

import json
import logging
import time
import uuid
from datetime import UTC, date, datetime
from decimal import Decimal
from typing import Any

from flask import Flask, g, has_request_context, request

REQUEST_ID_HEADER = "X-Request-ID"

STRUCTURED_FIELDS = (
    "event",
    "request_id",
    "method",
    "route",
    "status",
    "duration_ms",
    "provider",
    "base",
    "as_of",
    "days",
    "cells",
    "missing_points",
    "error",
    "client_ip",
)


class JSONLogFormatter(logging.Formatter):
    """One JSON object per line: time, level, logger, message, structured fields."""

    def format(self, record: logging.LogRecord) -> str:
        payload: dict[str, Any] = {
            "timestamp": datetime.fromtimestamp(record.created, tz=UTC).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
        }
        for name in STRUCTURED_FIELDS:
            value = getattr(record, name, None)
            if value is not None:
                payload[name] = _plain(value)
        if record.exc_info:
            payload["exc_info"] = self.formatException(record.exc_info)
        return json.dumps(payload, separators=(",", ":"))


def _plain(value: Any) -> Any:
    if isinstance(value, date | datetime):
        return value.isoformat()
    if isinstance(value, Decimal):
        return str(value)
    if isinstance(value, str | int | float | bool):
        return value
    return str(value)


def setup_logging(app: Flask) -> None:
    """Send all logs to one stream handler on the root logger."""

    if app.extensions.get("fxboard_logging"):
        return

    level = str(app.config.get("LOG_LEVEL", "INFO")).upper()
    handler = logging.StreamHandler()
    if app.config.get("LOG_JSON_ENABLED"):
        handler.setFormatter(JSONLogFormatter())
    else:
        handler.setFormatter(logging.Formatter(app.config.get("LOG_FORMAT")))

    root = logging.getLogger()
    for existing in root.handlers[:]:
        root.removeHandler(existing)
    root.addHandler(handler)
    root.setLevel(level)

    # urllib3 logs every connection at DEBUG; a history build opens one per cell.
    logging.getLogger("urllib3").setLevel(logging.INFO)
    logging.getLogger("werkzeug").handlers = []
    app.logger.handlers = []
    app.logger.setLevel(level)

    app.extensions["fxboard_logging"] = True


def init_request_logging(app: Flask) -> None:
    """Tag each request with an id and log one line when it completes."""

    @app.before_request
    def _assign_request_id():
        g.request_id = request.headers.get(REQUEST_ID_HEADER) or uuid.uuid4().hex
        g.request_started = time.perf_counter()

    @app.after_request
    def _log_request(response):
        response.headers.setdefault(REQUEST_ID_HEADER, g.get("request_id", ""))
        fields = {
            "event": "request.completed",
            "request_id": g.get("request_id"),
            "method": request.method,
            "route": request.url_rule.rule if request.url_rule else request.path,
            "status": response.status_code,
            "duration_ms": _elapsed_ms(g.get("request_started")),
            "client_ip": request.remote_addr,
        }
        level = logging.ERROR if response.status_code >= 500 else logging.INFO
        app.logger.log(level, "Request handled", extra=fields)
        return response


def fetch_log_fields(
    *,
    provider: str,
    base: str,
    status: str,
    duration_ms: float,
    as_of: date | None = None,
    error: str | None = None,
) -> dict[str, Any]:
    """Fields for the log line written after each provider round trip."""

    return {
        "event": "provider.fetch",
        "request_id": current_request_id(),
        "provider": provider,
        "base": base,
        "as_of": as_of,
        "status": status,
        "duration_ms": round(duration_ms, 3),
        "error": error,
    }


def current_request_id() -> str | None:
    if not has_request_context():
        return None
    return g.get("request_id")


def _elapsed_ms(started: float | None) -> float | None:
    if started is None:
        return None
    return round((time.perf_counter() - started) * 1000, 3)
