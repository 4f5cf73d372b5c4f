"""CORS handling so the chart client can call the rate endpoints from a browser."""

from __future__ import annotations

from collections.abc import Iterable

from flask import Response, make_response, request

CORS_CONFIG_FLAG = "_cors_configured"


def init_cors(app) -> None:
    """Answer preflight requests and tag responses for allowed origins."""

    if app.config.get(CORS_CONFIG_FLAG):
        return

    allowed_origins = _split_entries(app.config.get("CORS_ALLOWED_ORIGINS", ()))
    if not allowed_origins:
        return

    allowed_headers = _split_entries(app.config.get("CORS_ALLOWED_HEADERS", ("Content-Type",)))
    allowed_methods = _split_entries(app.config.get("CORS_ALLOWED_METHODS", ("GET", "OPTIONS")))
    max_age = int(app.config.get("CORS_MAX_AGE", 600))
    wildcard = "*" in allowed_origins

    def origin_allowed(origin: str | None) -> bool:
        if not origin:
            return False
        return wildcard or origin in allowed_origins

    @app.before_request
    def handle_preflight():
        if request.method != "OPTIONS":
            return None

        origin = request.headers.get("Origin")
        if origin is None:
            return None
        if not origin_allowed(origin):
            return make_response("", 403)

        response = make_response("", 204)
        _apply_origin_headers(response, origin, wildcard=wildcard)
        response.headers["Access-Control-Allow-Methods"] = ", ".join(allowed_methods)
        response.headers["Access-Control-Allow-Headers"] = request.headers.get(
            "Access-Control-Request-Headers",
            ", ".join(allowed_headers),
        )
        response.headers["Access-Control-Max-Age"] = str(max_age)
        return response

    @app.after_request
    def apply_cors(response: Response):
        origin = request.headers.get("Origin")
        if origin_allowed(origin):
            _apply_origin_headers(response, origin, wildcard=wildcard)
        return response

    app.config[CORS_CONFIG_FLAG] = True


def _split_entries(raw: str | Iterable[str]) -> tuple[str, ...]:
    candidates = raw.split(",") if isinstance(raw, str) else list(raw)
    return tuple(item.strip() for item in candidates if item and item.strip())


def _apply_origin_headers(response: Response, origin: str, *, wildcard: bool) -> None:
    response.headers["Access-Control-Allow-Origin"] = "*" if wildcard else origin
    vary = [item.strip() for item in response.headers.get("Vary", "").split(",") if item.strip()]
    if "Origin" not in vary:
        vary.append("Origin")
    response.headers["Vary"] = ", ".join(vary)
