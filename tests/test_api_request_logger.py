"""Tests for API request tracing."""

from unittest.mock import patch

import pytest

from trip_planner.adapters.api_request_logger import (
    log_api_request,
    log_api_response,
    redact_headers,
    request_url,
    should_log_requests,
)

LOGGER = "trip_planner.adapters.api_request_logger.logger"
PLAN_URL = "https://data.mobilites-m.fr/api/routers/default/plan"


@pytest.mark.parametrize(("value", "expected"), [("true", True), ("True", True), ("1", False)])
def test_when_env_is_set_then_flag_follows_it(
    monkeypatch: pytest.MonkeyPatch, value: str, expected: bool
) -> None:
    """Given TRIP_LOG_REQUESTS set, when checking, then only 'true' enables tracing."""
    monkeypatch.setenv("TRIP_LOG_REQUESTS", value)

    assert should_log_requests() is expected


def test_when_env_not_set_then_tracing_is_disabled(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv("TRIP_LOG_REQUESTS", raising=False)

    assert should_log_requests() is False


def test_request_url_sorts_and_encodes_params() -> None:
    """Given unordered params, when building the URL, then they are sorted and encoded."""
    url = request_url(PLAN_URL, {"toPlace": "45.2,5.7", "fromPlace": "45.1,5.7", "mode": "WALK"})

    assert url == f"{PLAN_URL}?fromPlace=45.1%2C5.7&mode=WALK&toPlace=45.2%2C5.7"


def test_request_url_appends_to_existing_query() -> None:
    assert (
        request_url("https://example.org/search?format=json", {"q": "Gare"})
        == "https://example.org/search?format=json&q=Gare"
    )


def test_request_url_without_params_is_unchanged() -> None:
    assert request_url(PLAN_URL, None) == PLAN_URL


@pytest.mark.parametrize("header", ["Authorization", "Cookie", "X-API-Key"])
def test_when_header_is_sensitive_then_value_is_redacted(header: str) -> None:
    """Given a credential header, when redacting, then only its value is hidden."""
    redacted = redact_headers({header: "secret-value", "Origin": "tests"})

    assert redacted == {header: "***", "Origin": "tests"}


def test_when_tracing_disabled_then_nothing_is_logged(monkeypatch: pytest.MonkeyPatch) -> None:
    """Given tracing disabled, when logging a request and response, then the logger is idle."""
    monkeypatch.delenv("TRIP_LOG_REQUESTS", raising=False)

    with patch(LOGGER) as mock_logger:
        log_api_request("mobilites_api", PLAN_URL)
        log_api_response("mobilites_api", PLAN_URL, 200, 0.1)

    mock_logger.info.assert_not_called()


def test_when_tracing_enabled_then_request_line_names_api_and_headers(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    """Given tracing enabled, when logging a request, then API, URL and safe headers appear."""
    monkeypatch.setenv("TRIP_LOG_REQUESTS", "true")

    with patch(LOGGER) as mock_logger:
        log_api_request(
            "nominatim",
            "https://nominatim.openstreetmap.org/search",
            params={"q": "Gare", "limit": 1},
            headers={"User-Agent": "tests", "Cookie": "secret"},
        )

    message = mock_logger.info.call_args[0][0]
    assert message.startswith("nominatim: GET https://nominatim.openstreetmap.org/search?limit=1")
    assert "User-Agent=tests" in message
    assert "secret" not in message


def test_when_tracing_enabled_then_response_latency_is_logged(
    monkeypatch: pytest.MonkeyPatch,
) -> None:
    monkeypatch.setenv("TRIP_LOG_REQUESTS", "true")

    with patch(LOGGER) as mock_logger:
        log_api_response("open_meteo", "https://api.open-meteo.com/v1/forecast", 200, 0.25)

    assert mock_logger.info.call_args[0][0] == (
        "open_meteo: 200 from https://api.open-meteo.com/v1/forecast in 250 ms"
    )
