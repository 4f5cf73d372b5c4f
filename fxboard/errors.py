"""Application-wide error types and JSON error handlers."""

from __future__ import annotations

from typing import Any

from flask import Flask, jsonify


class APIError(Exception):
    """Base class for errors that are rendered as JSON responses."""

    status_code: int = 400

    def __init__(
        self, message: str, *, status_code: int | None = None, payload: dict[str, Any] | None = None
    ):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code
        self.payload = payload or {}


class ValidationError(APIError):
    """Error raised for malformed request input."""

    status_code = 422


DEFAULT_STATUS_MESSAGES: dict[int, str] = {
    400: "Request could not be processed.",
    404: "Resource not found.",
    422: "Submitted data is invalid.",
    502: "Upstream provider unavailable.",
    503: "Service temporarily unavailable. Please retry in a moment.",
}


def register_error_handlers(app: Flask) -> None:
    """Attach error handlers to the Flask application."""

    @app.errorhandler(APIError)
    def handle_api_error(error: APIError):
        message = error.message or DEFAULT_STATUS_MESSAGES.get(error.status_code, "Request failed.")
        response: dict[str, Any] = {"message": message}
        if error.payload:
            response.update(error.payload)

        field = error.payload.get("field")
        if field and "field_errors" not in response:
            response["field_errors"] = {str(field): [message]}

        return jsonify(response), error.status_code
