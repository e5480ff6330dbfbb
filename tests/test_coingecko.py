"""Tests for the CoinGecko datasource."""

from __future__ import annotations

from collections.abc import Callable
from datetime import datetime
from unittest.mock import Mock, patch

import pytest

from spurious_correlations.datasources.coingecko import ADAPTER, fetch_series, lookback_days
from spurious_correlations.errors import FetchError
from spurious_correlations.schemas import CoinGeckoSpec, Granularity
from spurious_correlations.timekeys import day_key

GET = "spurious_correlations.services.http.session.get"

BITCOIN = CoinGeckoSpec(coin_id="bitcoin", coin_name="Bitcoin")


def _ms(*args: int) -> float:
    return datetime(*args).timestamp() * 1000  # type: ignore[arg-type]


class TestLookbackDays:
    """Month lookback to day count."""

    @pytest.mark.parametrize(
        ("months", "days"),
        [(0, 30), (1, 31), (6, 186), (36, 1116), (120, 3650)],
    )
    def test_bounds(self, months: int, days: int) -> None:
        assert lookback_days(months) == days


class TestFetchSeries:
    """Local-day keys and monthly means."""

    @patch(GET)
    def test_request(self, mock_get: Mock, json_response: Callable[..., Mock]) -> None:
        mock_get.return_value = json_response({"prices": []})

        fetch_series(BITCOIN, 6, Granularity.DAILY)

        url = mock_get.call_args[0][0]
        params = mock_get.call_args[1]["params"]
        assert url == "https://api.coingecko.com/api/v3/coins/bitcoin/market_chart"
        assert params == {"vs_currency": "usd", "days": 186}

    @patch(GET)
    def test_daily_keeps_last_sample(
        self, mock_get: Mock, json_response: Callable[..., Mock]
    ) -> None:
        morning = _ms(2024, 3, 1, 8, 0)
        evening = _ms(2024, 3, 1, 20, 0)
        next_day = _ms(2024, 3, 2, 12, 0)
        mock_get.return_value = json_response(
            {"prices": [[morning, 100.0], [evening, 110.0], [next_day, 120.0]]}
        )

        series = fetch_series(BITCOIN, 6, Granularity.DAILY)

        assert series == {
            day_key(datetime.fromtimestamp(evening / 1000)): 110.0,
            day_key(datetime.fromtimestamp(next_day / 1000)): 120.0,
        }

    @patch(GET)
    def test_monthly_mean(self, mock_get: Mock, json_response: Callable[..., Mock]) -> None:
        mock_get.return_value = json_response(
            {
                "prices": [
                    [_ms(2024, 3, 10, 12), 100.0],
                    [_ms(2024, 3, 11, 12), 200.0],
                    [_ms(2024, 4, 10, 12), 50.0],
                    [_ms(2024, 4, 11, 12), None],
                ]
            }
        )

        series = fetch_series(BITCOIN, 6, Granularity.MONTHLY)

        assert series == {"202403": 150.0, "202404": 50.0}

    @patch(GET)
    def test_out_of_range_timestamp(
        self, mock_get: Mock, json_response: Callable[..., Mock]
    ) -> None:
        mock_get.return_value = json_response({"prices": [[1e20, 1.0], [2e20, 2.0]]})

        with pytest.raises(FetchError, match="CoinGecko: invalid timestamp"):
            fetch_series(BITCOIN, 6, Granularity.DAILY)


class TestAdapter:
    """Labels and links."""

    def test_label_uses_name(self) -> None:
        assert ADAPTER.label(BITCOIN) == "Bitcoin price (USD)"

    def test_label_falls_back_to_id(self) -> None:
        assert ADAPTER.label(CoinGeckoSpec(coin_id="shiba-inu")) == "shiba-inu price (USD)"

    def test_source_url(self) -> None:
        assert ADAPTER.source_url(BITCOIN) == "https://www.coingecko.com/en/coins/bitcoin"
