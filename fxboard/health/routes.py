"""Route handlers for health checks."""

from __future__ import annotations

from flask import current_app
from flask.views import MethodView

from fxboard.schemas import HealthStatusSchema

from . import blp


@blp.route("")
class HealthStatus(MethodView):
    @blp.response(200, HealthStatusSchema())
    def get(self):
        fetcher = current_app.extensions.get("rate_fetcher")
        return {
            "status": "ok",
            "app": current_app.config.get("APP_NAME", "fx-rate-board"),
            "provider": fetcher.provider_name if fetcher is not None else "unconfigured",
        }
