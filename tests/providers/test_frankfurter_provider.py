from __future__ import annotations

from datetime import date
from decimal import Decimal

import pytest
import responses
from responses import matchers

from fxboard.providers.base import FetchFailed
from fxboard.providers.frankfurter_provider import FrankfurterProvider
from tests.fixtures import load_json

BASE_URL = "https://frankfurter.test"


@pytest.fixture()
def provider():
    return FrankfurterProvider.from_config(
        {"FRANKFURTER_API_BASE_URL": BASE_URL, "REQUEST_TIMEOUT_SECONDS": 1}
    )


@responses.activate
def test_get_rates_for_day_passes_base_as_from(provider):
    responses.add(
        responses.GET,
        f"{BASE_URL}/2025-10-10",
        json=load_json("frankfurter_2025-10-10.json"),
        match=[matchers.query_param_matcher({"from": "USD"})],
        status=200,
    )

    mapping = provider.get_rates("usd", on=date(2025, 10, 10))

    assert mapping.source == "frankfurter"
    assert mapping.rates["JPY"] == Decimal("151.73")
    assert mapping.get("GBP") is None


@responses.activate
def test_latest_endpoint_used_without_day(provider):
    responses.add(
        responses.GET,
        f"{BASE_URL}/latest",
        json={"base": "EUR", "date": "2025-10-13", "rates": {"usd": 1.16}},
        status=200,
    )

    mapping = provider.get_rates("EUR")

    assert mapping.get("USD") == Decimal("1.16")


@responses.activate
def test_not_found_answer_is_a_fetch_failure(provider):
    responses.add(
        responses.GET,
        f"{BASE_URL}/latest",
        json={"message": "not found"},
        status=404,
    )

    with pytest.raises(FetchFailed, match="Client error 404"):
        provider.get_rates("XXX")


@responses.activate
def test_message_without_rates_is_a_fetch_failure(provider):
    responses.add(responses.GET, f"{BASE_URL}/latest", json={"message": "bad base"}, status=200)

    with pytest.raises(FetchFailed, match="bad base"):
        provider.get_rates("USD")
