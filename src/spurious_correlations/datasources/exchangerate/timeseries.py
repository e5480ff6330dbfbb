"""Daily exchange rates between two currencies."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from spurious_correlations.aggregation import aggregate_mean, is_finite_number
from spurious_correlations.datasources.base import (
    Capabilities,
    ProviderAdapter,
    Series,
    parse_response,
)
from spurious_correlations.datasources.exchangerate.client import (
    DOCS_URL,
    PROVIDER_NAME,
    TIMESERIES_API,
)
from spurious_correlations.datasources.exchangerate.models import TimeseriesResponse
from spurious_correlations.errors import FetchError
from spurious_correlations.schemas import ExchangeRateSpec, Granularity
from spurious_correlations.services.http import get_json
from spurious_correlations.timekeys import key_from_iso, range_dates

if TYPE_CHECKING:
    from datetime import date


def fetch_timeseries(base: str, symbol: str, start: date, end: date) -> TimeseriesResponse:
    """
    Fetch daily ``base`` -> ``symbol`` rates between two dates (inclusive).

    Raises:
        FetchError: Non-2xx status, or a ``success: false`` payload.
    """
    params: dict[str, Any] = {
        "start_date": start.isoformat(),
        "end_date": end.isoformat(),
        "base": base,
        "symbols": symbol,
    }
    payload = get_json(TIMESERIES_API, provider=PROVIDER_NAME, params=params)
    data = parse_response(TimeseriesResponse, payload, provider=PROVIDER_NAME)
    if data.success is False:
        raise FetchError(PROVIDER_NAME, message=data.error_message())
    return data


def fetch_series(spec: ExchangeRateSpec, months_back: int, granularity: Granularity) -> Series:
    """Daily rates as-is, or their monthly mean."""
    window = range_dates(months_back)
    data = fetch_timeseries(spec.base, spec.symbol, window.start, window.end)
    dates = sorted(data.rates)
    values = [data.rates[d].get(spec.symbol) for d in dates]
    if granularity == Granularity.MONTHLY:
        return aggregate_mean(dates, values)
    return {
        key_from_iso(d, Granularity.DAILY): float(v)  # type: ignore[arg-type]
        for d, v in zip(dates, values, strict=True)
        if is_finite_number(v)
    }


def label(spec: ExchangeRateSpec) -> str:
    return f"{spec.base}→{spec.symbol} FX"


def source_url(_spec: ExchangeRateSpec) -> str:
    return DOCS_URL


ADAPTER: ProviderAdapter[ExchangeRateSpec] = ProviderAdapter(
    name=PROVIDER_NAME,
    capabilities=Capabilities(daily=True, monthly=True),
    label=label,
    source_url=source_url,
    fetch=fetch_series,
)
