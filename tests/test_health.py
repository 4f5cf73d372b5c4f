"""Smoke tests for the health endpoint."""

from __future__ import annotations


def test_health_endpoint_returns_ok(client):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.get_json() == {"status": "ok", "app": "fx-rate-board", "provider": "mock"}


def test_openapi_document_lists_rate_routes(client):
    response = client.get("/docs/openapi.json")

    assert response.status_code == 200
    paths = response.get_json()["paths"]
    assert {"/rates/history", "/rates/live", "/rates/snapshot", "/health"} <= set(paths)
