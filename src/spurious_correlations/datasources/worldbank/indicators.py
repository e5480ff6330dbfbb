"""Annual indicator values for a country."""

from __future__ import annotations

import re
from typing import Any
from urllib.parse import quote

from spurious_correlations.datasources.base import (
    Capabilities,
    ProviderAdapter,
    Series,
    parse_response,
)
from spurious_correlations.datasources.worldbank.client import (
    INDICATOR_API,
    INDICATOR_PAGE,
    PER_PAGE,
    PROVIDER_NAME,
)
from spurious_correlations.datasources.worldbank.models import (
    ErrorEnvelope,
    IndicatorPage,
    IndicatorRow,
)
from spurious_correlations.errors import FetchError
from spurious_correlations.schemas import Granularity, WorldBankSpec
from spurious_correlations.services.http import get_json

_YEAR = re.compile(r"^\d{4}$")


def _rows_from_payload(payload: Any) -> list[IndicatorRow]:
    if not isinstance(payload, list):
        raise FetchError(PROVIDER_NAME, message="expected a JSON array")
    if payload and isinstance(payload[0], dict) and "message" in payload[0]:
        envelope = parse_response(ErrorEnvelope, payload[0], provider=PROVIDER_NAME)
        raise FetchError(PROVIDER_NAME, message=envelope.text())
    if len(payload) < 2 or payload[1] is None:
        return []
    page = parse_response(IndicatorPage, {"rows": payload[1]}, provider=PROVIDER_NAME)
    return page.rows


def fetch_indicator(country: str, indicator: str) -> list[IndicatorRow]:
    """Fetch every available year of ``indicator`` for ``country``.

    Raises:
        FetchError: Non-2xx status or an error-message payload.
    """
    url = INDICATOR_API.format(
        country=quote(country, safe=""), indicator=quote(indicator, safe="")
    )
    payload = get_json(url, provider=PROVIDER_NAME, params={"format": "json", "per_page": PER_PAGE})
    return _rows_from_payload(payload)


def fetch_series(spec: WorldBankSpec, _months_back: int, _granularity: Granularity) -> Series:
    """Values keyed ``<year>01``; null values and non-year dates are dropped."""
    rows = fetch_indicator(spec.country, spec.indicator)
    return {
        f"{row.date}01": row.value
        for row in rows
        if row.value is not None and _YEAR.match(row.date)
    }


def label(spec: WorldBankSpec) -> str:
    return spec.label or f"World Bank {spec.indicator} ({spec.country})"


def source_url(spec: WorldBankSpec) -> str:
    indicator = quote(spec.indicator, safe="")
    return f"{INDICATOR_PAGE}{indicator}?locations={quote(spec.country, safe='')}"


ADAPTER: ProviderAdapter[WorldBankSpec] = ProviderAdapter(
    name=PROVIDER_NAME,
    capabilities=Capabilities(daily=False, monthly=True),
    label=label,
    source_url=source_url,
    fetch=fetch_series,
)
