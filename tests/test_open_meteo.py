"""Tests for the Open-Meteo archive datasource."""

from __future__ import annotations

from collections.abc import Callable
from unittest.mock import Mock, patch

import pytest

from spurious_correlations.datasources.open_meteo import ADAPTER, fetch_series
from spurious_correlations.schemas import Granularity, OpenMeteoSpec
from spurious_correlations.timekeys import range_dates

GET = "spurious_correlations.services.http.session.get"

LONDON = OpenMeteoSpec(lat=51.5074, lon=-0.1278, variable="precipitation_sum")

PAYLOAD = {
    "latitude": 51.5,
    "longitude": -0.125,
    "daily": {
        "time": ["2024-01-30", "2024-01-31", "2024-02-01", "2024-02-02"],
        "precipitation_sum": [2.0, 4.0, None, 1.5],
    },
}


class TestFetchSeries:
    """Daily values and monthly means."""

    @patch(GET)
    def test_request_params(self, mock_get: Mock, json_response: Callable[..., Mock]) -> None:
        mock_get.return_value = json_response(PAYLOAD)

        fetch_series(LONDON, 12, Granularity.MONTHLY)

        url = mock_get.call_args[0][0]
        params = mock_get.call_args[1]["params"]
        window = range_dates(12)
        assert url == "https://archive-api.open-meteo.com/v1/era5"
        assert params["daily"] == "precipitation_sum"
        assert params["timezone"] == "UTC"
        assert params["start_date"] == window.start.isoformat()
        assert params["end_date"] == window.end.isoformat()

    @patch(GET)
    def test_monthly_mean(self, mock_get: Mock, json_response: Callable[..., Mock]) -> None:
        mock_get.return_value = json_response(PAYLOAD)

        series = fetch_series(LONDON, 12, Granularity.MONTHLY)

        assert series == {"202401": pytest.approx(3.0), "202402": pytest.approx(1.5)}

    @patch(GET)
    def test_daily_skips_nulls(self, mock_get: Mock, json_response: Callable[..., Mock]) -> None:
        mock_get.return_value = json_response(PAYLOAD)

        series = fetch_series(LONDON, 12, Granularity.DAILY)

        assert series == {"20240130": 2.0, "20240131": 4.0, "20240202": 1.5}

    @patch(GET)
    def test_missing_daily_block(self, mock_get: Mock, json_response: Callable[..., Mock]) -> None:
        mock_get.return_value = json_response({"latitude": 51.5})

        assert fetch_series(LONDON, 12, Granularity.MONTHLY) == {}

    @patch(GET)
    def test_missing_variable(self, mock_get: Mock, json_response: Callable[..., Mock]) -> None:
        mock_get.return_value = json_response({"daily": {"time": ["2024-01-01"]}})

        assert fetch_series(LONDON, 12, Granularity.DAILY) == {}


class TestAdapter:
    """Labels and links."""

    def test_explicit_label(self) -> None:
        spec = OpenMeteoSpec(lat=1, lon=2, variable="temperature_2m_max", label="Cairo max temp")
        assert ADAPTER.label(spec) == "Cairo max temp"

    def test_generated_label(self) -> None:
        assert ADAPTER.label(LONDON) == "Open-Meteo precipitation_sum (51.51, -0.13)"
