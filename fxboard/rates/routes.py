"""Routes serving exchange-rate data to the chart and table views."""

from __future__ import annotations

from typing import Any

from flask import current_app
from flask.views import MethodView

from fxboard.errors import ValidationError
from fxboard.monitoring import timed_operation
from fxboard.schemas import (
    HistoryQuerySchema,
    HistoryResponseSchema,
    LiveRatesResponseSchema,
    SnapshotResponseSchema,
)
from fxboard.services import (
    HistoryBuilder,
    HistoryResult,
    LiveRatesResult,
    LiveRateView,
    SourceUnavailable,
    load_snapshot,
)

from . import blp


@blp.route("/history")
class RateHistory(MethodView):
    @blp.arguments(HistoryQuerySchema, location="query")
    @blp.response(200, HistoryResponseSchema())
    @blp.alt_response(400, schema=HistoryResponseSchema(), description="Invalid base currency")
    def get(self, args):
        """Daily rates of the target currencies against ``base``, oldest first."""

        config = current_app.config
        days = args.get("days") or int(config["HISTORY_WINDOW_DAYS"])
        max_days = int(config["HISTORY_MAX_DAYS"])
        if days > max_days:
            raise ValidationError(
                f"'days' must be between 1 and {max_days}.",
                payload={"field": "days"},
            )

        builder: HistoryBuilder = current_app.extensions["history_builder"]
        with timed_operation("history.build", base=args.get("base"), days=days) as timing:
            result = builder.build(args.get("base"), days)
            timing.update(result.log_fields())

        if not result.success:
            return _history_payload(result), 400
        return _history_payload(result)


@blp.route("/live")
class LiveRates(MethodView):
    @blp.response(200, LiveRatesResponseSchema())
    @blp.alt_response(503, schema=LiveRatesResponseSchema(), description="Provider unavailable")
    def get(self):
        """Current rates of the major currencies for the configured base."""

        view: LiveRateView = current_app.extensions["live_rate_view"]
        result = view.current_rates()
        if not result.ok:
            return _live_payload(result), 503
        return _live_payload(result)


@blp.route("/snapshot")
class RateSnapshot(MethodView):
    @blp.response(200, SnapshotResponseSchema())
    def get(self):
        """Rows of the locally stored rate table, in file order."""

        path = current_app.config.get("SNAPSHOT_PATH", "")
        try:
            rows = load_snapshot(path)
        except SourceUnavailable as exc:
            current_app.logger.warning("Rate snapshot unavailable: %s", exc)
            return {"available": False, "rows": [], "message": "No snapshot available."}

        return {
            "available": True,
            "rows": [{"code": row.currency_code, "rate": row.rate} for row in rows],
        }


def _history_payload(result: HistoryResult) -> dict[str, Any]:
    payload: dict[str, Any] = {"success": result.success, "base": result.base}
    if result.success:
        payload["data"] = result.series
        payload["dates"] = result.dates
    if result.message:
        payload["message"] = result.message
    return payload


def _live_payload(result: LiveRatesResult) -> dict[str, Any]:
    return {
        "ok": result.ok,
        "base": result.base,
        "text": result.text,
        "rates": [{"code": code, "rate": rate} for code, rate in result.rates],
    }
