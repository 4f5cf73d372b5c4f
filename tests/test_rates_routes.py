from __future__ import annotations

import logging
from datetime import timedelta

import pytest

from fxboard.services import HistoryBuilder, LiveRateView, RateFetcher
from fxboard.utils.datetime import utc_today
from tests.fixtures import always_failing, constant_rates


@pytest.fixture()
def use_provider(app):
    """Swap the provider behind the live view and history builder."""

    def _install(provider, targets=("USD", "EUR", "AUD")):
        fetcher = RateFetcher(provider)
        app.extensions["rate_fetcher"] = fetcher
        app.extensions["history_builder"] = HistoryBuilder(fetcher, targets)
        app.extensions["live_rate_view"] = LiveRateView(fetcher, base="USD", symbols=["JPY", "EUR"])
        return provider

    return _install


def test_history_returns_aligned_series(client, use_provider):
    use_provider(constant_rates({"USD": 150.25, "EUR": 160.10}))

    response = client.get("/rates/history?base=jpy&days=5")

    assert response.status_code == 200
    payload = response.get_json()
    assert payload["success"] is True
    assert payload["base"] == "JPY"
    assert payload["data"] == {
        "USD": [150.25] * 5,
        "EUR": [160.1] * 5,
        "AUD": [None] * 5,
    }
    today = utc_today()
    assert payload["dates"] == [
        (today - timedelta(days=offset)).isoformat() for offset in range(4, -1, -1)
    ]
    assert "message" not in payload


def test_history_body_lists_currencies_in_target_order(client, use_provider):
    use_provider(constant_rates({"USD": 1, "EUR": 2}), targets=("USD", "EUR", "AUD"))

    body = client.get("/rates/history?base=jpy&days=2").get_data(as_text=True)

    assert body.index('"USD"') < body.index('"EUR"') < body.index('"AUD"')


def test_history_uses_default_window(client, app, use_provider):
    use_provider(constant_rates({"USD": 1}))
    app.config["HISTORY_WINDOW_DAYS"] = 3

    payload = client.get("/rates/history?base=EUR").get_json()

    assert payload["data"]["USD"] == [1.0, 1.0, 1.0]


def test_history_with_failing_provider_reports_gaps(client, use_provider):
    use_provider(always_failing())

    response = client.get("/rates/history?base=usd&days=2")

    assert response.status_code == 200
    payload = response.get_json()
    assert payload["success"] is True
    assert payload["data"] == {"USD": [None, None], "EUR": [None, None], "AUD": [None, None]}


@pytest.mark.parametrize("query", ["", "?base=", "?base=%20%20"])
def test_history_without_base_is_rejected(client, use_provider, query):
    provider = use_provider(constant_rates({"USD": 1}))

    response = client.get(f"/rates/history{query}")

    assert response.status_code == 400
    payload = response.get_json()
    assert payload["success"] is False
    assert payload["message"] == "Base currency is required."
    assert "data" not in payload
    assert provider.calls == []


def test_history_rejects_window_above_limit(client, app):
    app.config["HISTORY_MAX_DAYS"] = 10

    response = client.get("/rates/history?base=USD&days=11")

    assert response.status_code == 422
    payload = response.get_json()
    assert payload["field_errors"] == {"days": ["'days' must be between 1 and 10."]}


def test_history_rejects_non_positive_window(client):
    response = client.get("/rates/history?base=USD&days=0")

    assert response.status_code == 422


def test_history_with_mock_provider(client):
    payload = client.get("/rates/history?base=usd&days=3").get_json()

    assert payload["success"] is True
    assert list(payload["data"]) == ["USD", "EUR", "GBP", "AUD"]
    assert payload["data"]["USD"] == [None, None, None]
    assert all(value is not None for value in payload["data"]["EUR"])


def test_live_rates_success(client, use_provider):
    use_provider(constant_rates({"EUR": 0.9, "JPY": 150.123456}))

    response = client.get("/rates/live")

    assert response.status_code == 200
    assert response.get_json() == {
        "ok": True,
        "base": "USD",
        "text": "JPY: 150.1235\nEUR: 0.9000",
        "rates": [{"code": "JPY", "rate": "150.1235"}, {"code": "EUR", "rate": "0.9000"}],
    }


def test_live_rates_failure_is_displayable(client, use_provider):
    use_provider(always_failing("Server error 500"))

    response = client.get("/rates/live")

    assert response.status_code == 503
    payload = response.get_json()
    assert payload["ok"] is False
    assert payload["text"] == "Failed to fetch exchange rates: Server error 500"
    assert payload["rates"] == []


def test_snapshot_rows_in_file_order(client):
    response = client.get("/rates/snapshot")

    assert response.status_code == 200
    assert response.get_json() == {
        "available": True,
        "rows": [
            {"code": "USD", "rate": "1.0000"},
            {"code": "JPY", "rate": "150.2500"},
            {"code": "EUR", "rate": "0.9210"},
        ],
    }


def test_snapshot_missing_file_is_not_an_error(client, app, tmp_path):
    app.config["SNAPSHOT_PATH"] = str(tmp_path / "absent.csv")

    response = client.get("/rates/snapshot")

    assert response.status_code == 200
    assert response.get_json() == {
        "available": False,
        "rows": [],
        "message": "No snapshot available.",
    }


def test_history_timing_log_counts_missing_points(client, app, use_provider, caplog):
    use_provider(constant_rates({"USD": 1, "EUR": 2}))
    app.config["TIMING_LOGS_ENABLED"] = True

    with caplog.at_level(logging.INFO, logger=app.logger.name):
        client.get("/rates/history?base=jpy&days=2")

    record = next(r for r in caplog.records if getattr(r, "event", None) == "history.build")
    assert record.base == "JPY"
    assert record.days == 2
    assert record.cells == 6
    assert record.missing_points == 2
    assert record.status == "success"
