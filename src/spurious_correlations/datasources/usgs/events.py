"""Earthquake counts from the FDSN event catalog."""

from __future__ import annotations

from datetime import date, datetime
from typing import Any

from spurious_correlations.aggregation import aggregate_sum, count_by_key
from spurious_correlations.datasources.base import (
    Capabilities,
    ProviderAdapter,
    Series,
    parse_response,
)
from spurious_correlations.datasources.usgs.client import DOCS_URL, FDSN_EVENT_API, PROVIDER_NAME
from spurious_correlations.datasources.usgs.models import FeatureCollection
from spurious_correlations.errors import FetchError
from spurious_correlations.schemas import Granularity, UsgsQuakesSpec
from spurious_correlations.services.http import get_json
from spurious_correlations.timekeys import day_key, range_dates


def fetch_events(start: date, end: date, min_magnitude: float) -> FeatureCollection:
    """Fetch all events in a date window at or above ``min_magnitude``."""
    params: dict[str, Any] = {
        "format": "geojson",
        "starttime": start.isoformat(),
        "endtime": end.isoformat(),
        "minmagnitude": min_magnitude,
    }
    payload = get_json(FDSN_EVENT_API, provider=PROVIDER_NAME, params=params)
    return parse_response(FeatureCollection, payload, provider=PROVIDER_NAME)


def event_days(collection: FeatureCollection) -> list[str]:
    """Local day key of every event that carries an origin time."""
    days: list[str] = []
    for feature in collection.features:
        if feature.properties is None or feature.properties.time is None:
            continue
        ms = feature.properties.time
        try:
            days.append(day_key(datetime.fromtimestamp(ms / 1000)))
        except (OSError, OverflowError, ValueError) as exc:
            msg = f"invalid origin time {ms!r}"
            raise FetchError(PROVIDER_NAME, message=msg) from exc
    return days


def fetch_series(spec: UsgsQuakesSpec, months_back: int, granularity: Granularity) -> Series:
    """Event counts per day, or per month."""
    window = range_dates(months_back)
    data = fetch_events(window.start, window.end, spec.min_magnitude)
    days = event_days(data)
    if granularity == Granularity.MONTHLY:
        return aggregate_sum(days, [1] * len(days))
    return count_by_key(days)


def label(spec: UsgsQuakesSpec) -> str:
    return f"Earthquakes ≥{spec.min_magnitude:g}"


def source_url(_spec: UsgsQuakesSpec) -> str:
    return DOCS_URL


ADAPTER: ProviderAdapter[UsgsQuakesSpec] = ProviderAdapter(
    name=PROVIDER_NAME,
    capabilities=Capabilities(daily=True, monthly=True),
    label=label,
    source_url=source_url,
    fetch=fetch_series,
)
