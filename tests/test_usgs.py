"""Tests for the USGS earthquake datasource."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from unittest.mock import Mock, patch

import pytest

from spurious_correlations.datasources.usgs import ADAPTER, fetch_series
from spurious_correlations.errors import FetchError
from spurious_correlations.schemas import Granularity, UsgsQuakesSpec
from spurious_correlations.timekeys import range_dates

GET = "spurious_correlations.services.http.session.get"

BIG = UsgsQuakesSpec(min_magnitude=6.0)


def _feature(*args: int) -> dict[str, object]:
    ms = int(datetime(*args).timestamp() * 1000)  # type: ignore[arg-type]
    return {"id": f"us{ms}", "properties": {"time": ms, "mag": 6.1, "place": "Somewhere"}}


PAYLOAD = {
    "type": "FeatureCollection",
    "features": [
        _feature(2024, 1, 10, 12),
        _feature(2024, 1, 10, 14),
        _feature(2024, 1, 20, 12),
        _feature(2024, 2, 5, 12),
        {"id": "no-time", "properties": {"mag": 6.5}},
    ],
}


class TestFetchSeries:
    """Event counts."""

    @patch(GET)
    def test_request_params(self, mock_get: Mock, json_response: Callable[..., Mock]) -> None:
        mock_get.return_value = json_response({"features": []})

        fetch_series(BIG, 12, Granularity.MONTHLY)

        params = mock_get.call_args[1]["params"]
        window = range_dates(12)
        assert params["format"] == "geojson"
        assert params["minmagnitude"] == 6.0
        assert params["starttime"] == window.start.isoformat()
        assert params["endtime"] == window.end.isoformat()

    @patch(GET)
    def test_daily_counts(self, mock_get: Mock, json_response: Callable[..., Mock]) -> None:
        mock_get.return_value = json_response(PAYLOAD)

        series = fetch_series(BIG, 12, Granularity.DAILY)

        assert series == {"20240110": 2.0, "20240120": 1.0, "20240205": 1.0}

    @patch(GET)
    def test_monthly_counts(self, mock_get: Mock, json_response: Callable[..., Mock]) -> None:
        mock_get.return_value = json_response(PAYLOAD)

        series = fetch_series(BIG, 12, Granularity.MONTHLY)

        assert series == {"202401": 3.0, "202402": 1.0}

    @patch(GET)
    def test_out_of_range_origin_time(
        self, mock_get: Mock, json_response: Callable[..., Mock]
    ) -> None:
        mock_get.return_value = json_response(
            {"features": [{"id": "bad", "properties": {"time": 10**20, "mag": 6.2}}]}
        )

        with pytest.raises(FetchError, match="USGS: invalid origin time"):
            fetch_series(BIG, 12, Granularity.MONTHLY)


class TestAdapter:
    """Labels."""

    def test_label(self) -> None:
        assert ADAPTER.label(UsgsQuakesSpec(min_magnitude=4.5)) == "Earthquakes ≥4.5"
        assert ADAPTER.label(BIG) == "Earthquakes ≥6"
