"""Daily new COVID-19 cases or deaths from cumulative timelines."""

from __future__ import annotations

import math
from datetime import date, datetime
from urllib.parse import quote

from spurious_correlations.aggregation import aggregate_sum, cumulative_to_daily
from spurious_correlations.datasources.base import (
    Capabilities,
    ProviderAdapter,
    Series,
    parse_response,
)
from spurious_correlations.datasources.disease_sh.client import (
    HISTORICAL_API,
    MIN_DAYS,
    PROVIDER_NAME,
    TIMELINE_DATE_FORMAT,
)
from spurious_correlations.datasources.disease_sh.models import HistoricalResponse, Timeline
from spurious_correlations.schemas import DiseaseShSpec, Granularity
from spurious_correlations.services.http import get_json
from spurious_correlations.timekeys import day_key


def lookback_days(months_back: int) -> int:
    return max(MIN_DAYS, math.ceil(months_back * 31))


def fetch_historical(country: str, days: int) -> HistoricalResponse:
    """Fetch the last ``days`` of cumulative counts for a country."""
    url = f"{HISTORICAL_API}/{quote(country, safe='')}"
    payload = get_json(url, provider=PROVIDER_NAME, params={"lastdays": days})
    return parse_response(HistoricalResponse, payload, provider=PROVIDER_NAME)


def _parse_timeline_date(text: str) -> date | None:
    try:
        return datetime.strptime(text, TIMELINE_DATE_FORMAT).date()
    except ValueError:
        return None


def _sorted_timeline(timeline: Timeline) -> tuple[list[str], list[float | None]]:
    """Day keys and running totals in chronological order."""
    dated: list[tuple[date, float | None]] = []
    for text, total in timeline.items():
        parsed = _parse_timeline_date(text)
        if parsed is not None:
            dated.append((parsed, total))
    dated.sort(key=lambda item: item[0])
    return [day_key(d) for d, _ in dated], [value for _, value in dated]


def fetch_series(spec: DiseaseShSpec, months_back: int, granularity: Granularity) -> Series:
    """
    Daily increments of the cumulative ``spec.field`` timeline.

    The first day has no predecessor and is dropped, so the series is one
    point shorter than the timeline.
    """
    data = fetch_historical(spec.country, lookback_days(months_back))
    days, totals = _sorted_timeline(data.field_timeline(spec.field))
    deltas = cumulative_to_daily(totals)
    daily_days = days[1:]
    if granularity == Granularity.MONTHLY:
        return aggregate_sum(daily_days, deltas)
    return dict(zip(daily_days, deltas, strict=True))


def label(spec: DiseaseShSpec) -> str:
    return f"COVID-19 {spec.field} ({spec.country})"


def source_url(spec: DiseaseShSpec) -> str:
    return f"{HISTORICAL_API}/{quote(spec.country, safe='')}?lastdays=all"


ADAPTER: ProviderAdapter[DiseaseShSpec] = ProviderAdapter(
    name=PROVIDER_NAME,
    capabilities=Capabilities(daily=True, monthly=True),
    label=label,
    source_url=source_url,
    fetch=fetch_series,
)
