"""Daily weather variables from the ERA5 archive."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from spurious_correlations.aggregation import aggregate_mean, is_finite_number
from spurious_correlations.datasources.base import (
    Capabilities,
    ProviderAdapter,
    Series,
    parse_response,
)
from spurious_correlations.datasources.open_meteo.client import (
    DOCS_URL,
    ERA5_ARCHIVE_API,
    PROVIDER_NAME,
    TIMEZONE,
)
from spurious_correlations.datasources.open_meteo.models import ArchiveResponse
from spurious_correlations.schemas import Granularity, OpenMeteoSpec
from spurious_correlations.services.http import get_json
from spurious_correlations.timekeys import key_from_iso, range_dates

if TYPE_CHECKING:
    from datetime import date


def fetch_archive_daily(
    lat: float,
    lon: float,
    variable: str,
    start: date,
    end: date,
) -> ArchiveResponse:
    """
    Fetch one daily variable from the ERA5 archive.

    Args:
        lat: Latitude.
        lon: Longitude.
        variable: Daily variable name, e.g. ``temperature_2m_max``.
        start: Start date (inclusive).
        end: End date (inclusive).
    """
    params: dict[str, Any] = {
        "latitude": lat,
        "longitude": lon,
        "start_date": start.isoformat(),
        "end_date": end.isoformat(),
        "daily": variable,
        "timezone": TIMEZONE,
    }
    payload = get_json(ERA5_ARCHIVE_API, provider=PROVIDER_NAME, params=params)
    return parse_response(ArchiveResponse, payload, provider=PROVIDER_NAME)


def fetch_series(spec: OpenMeteoSpec, months_back: int, granularity: Granularity) -> Series:
    """Daily values as-is, or their monthly mean."""
    window = range_dates(months_back)
    data = fetch_archive_daily(spec.lat, spec.lon, spec.variable, window.start, window.end)
    if data.daily is None:
        return {}

    times = data.daily.time
    values = data.daily.values(spec.variable)
    if granularity == Granularity.MONTHLY:
        return aggregate_mean(times, values)

    series: Series = {}
    for iso, value in zip(times, values, strict=False):
        if is_finite_number(value):
            series[key_from_iso(iso, Granularity.DAILY)] = float(value)
    return series


def label(spec: OpenMeteoSpec) -> str:
    return spec.label or f"Open-Meteo {spec.variable} ({spec.lat:.2f}, {spec.lon:.2f})"


def source_url(_spec: OpenMeteoSpec) -> str:
    return DOCS_URL


ADAPTER: ProviderAdapter[OpenMeteoSpec] = ProviderAdapter(
    name=PROVIDER_NAME,
    capabilities=Capabilities(daily=True, monthly=True),
    label=label,
    source_url=source_url,
    fetch=fetch_series,
)
