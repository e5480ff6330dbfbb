"""Coin price history from the market-chart endpoint."""

from __future__ import annotations

import math
from datetime import datetime
from urllib.parse import quote

from spurious_correlations.aggregation import aggregate_mean, is_finite_number
from spurious_correlations.datasources.base import (
    Capabilities,
    ProviderAdapter,
    Series,
    parse_response,
)
from spurious_correlations.datasources.coingecko.client import (
    COIN_PAGE,
    COINS_API,
    MAX_DAYS,
    MIN_DAYS,
    PROVIDER_NAME,
)
from spurious_correlations.datasources.coingecko.models import MarketChartResponse
from spurious_correlations.errors import FetchError
from spurious_correlations.schemas import CoinGeckoSpec, Granularity
from spurious_correlations.services.http import get_json
from spurious_correlations.timekeys import day_key


def lookback_days(months_back: int) -> int:
    """Approximate a month lookback as ``ceil(31 * months)`` days, within API limits."""
    return max(MIN_DAYS, min(MAX_DAYS, math.ceil(months_back * 31)))


def _local_day(ms: float) -> str:
    try:
        return day_key(datetime.fromtimestamp(ms / 1000))
    except (OSError, OverflowError, ValueError) as exc:
        raise FetchError(PROVIDER_NAME, message=f"invalid timestamp {ms!r}") from exc


def fetch_market_chart(coin_id: str, vs_currency: str, days: int) -> MarketChartResponse:
    """Fetch ``days`` of price history for one coin."""
    url = f"{COINS_API}/{quote(coin_id, safe='')}/market_chart"
    params = {"vs_currency": vs_currency, "days": days}
    payload = get_json(url, provider=PROVIDER_NAME, params=params)
    return parse_response(MarketChartResponse, payload, provider=PROVIDER_NAME)


def fetch_series(spec: CoinGeckoSpec, months_back: int, granularity: Granularity) -> Series:
    """
    Prices keyed by local calendar day, or their monthly mean.

    Short lookbacks return several samples per day; the daily series keeps
    the last one.
    """
    data = fetch_market_chart(spec.coin_id, spec.vs_currency, lookback_days(months_back))
    days = [_local_day(ms) for ms, _ in data.prices]
    values = [value for _, value in data.prices]
    if granularity == Granularity.MONTHLY:
        return aggregate_mean(days, values)
    return {
        day: float(value)  # type: ignore[arg-type]
        for day, value in zip(days, values, strict=True)
        if is_finite_number(value)
    }


def label(spec: CoinGeckoSpec) -> str:
    return f"{spec.coin_name or spec.coin_id} price ({spec.vs_currency.upper()})"


def source_url(spec: CoinGeckoSpec) -> str:
    return COIN_PAGE + quote(spec.coin_id, safe="")


ADAPTER: ProviderAdapter[CoinGeckoSpec] = ProviderAdapter(
    name=PROVIDER_NAME,
    capabilities=Capabilities(daily=True, monthly=True),
    label=label,
    source_url=source_url,
    fetch=fetch_series,
)
