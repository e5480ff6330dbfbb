"""Publication counts per year for a search query."""

from __future__ import annotations

import re
from typing import TYPE_CHECKING
from urllib.parse import urlencode

from spurious_correlations.datasources.base import (
    Capabilities,
    ProviderAdapter,
    Series,
    parse_response,
)
from spurious_correlations.datasources.openalex.client import (
    EXTRA_MONTHS_BACK,
    GROUP_BY,
    PER_PAGE,
    PROVIDER_NAME,
    WORKS_API,
)
from spurious_correlations.datasources.openalex.models import WorksGroupResponse
from spurious_correlations.schemas import Granularity, OpenAlexSpec
from spurious_correlations.services.http import get_json
from spurious_correlations.timekeys import add_months, range_dates

if TYPE_CHECKING:
    from datetime import date

_YEAR = re.compile(r"^\d{4}$")


def fetch_works_by_year(query: str, start: date, end: date) -> WorksGroupResponse:
    """Fetch works matching ``query`` published between two dates, grouped by year."""
    date_filter = f"from_publication_date:{start.isoformat()},to_publication_date:{end.isoformat()}"
    params = {
        "search": query,
        "group_by": GROUP_BY,
        "per_page": PER_PAGE,
        "filter": date_filter,
    }
    payload = get_json(WORKS_API, provider=PROVIDER_NAME, params=params)
    return parse_response(WorksGroupResponse, payload, provider=PROVIDER_NAME)


def fetch_series(spec: OpenAlexSpec, months_back: int, _granularity: Granularity) -> Series:
    """Counts keyed ``<year>01``; buckets whose key is not a 4-digit year are dropped."""
    window = range_dates(months_back)
    data = fetch_works_by_year(spec.query, add_months(window.start, -EXTRA_MONTHS_BACK), window.end)
    series: Series = {}
    for bucket in data.group_by:
        year = "" if bucket.key is None else str(bucket.key)
        if not _YEAR.match(year):
            continue
        series[f"{year}01"] = float(bucket.count or 0)
    return series


def label(spec: OpenAlexSpec) -> str:
    return f"Publications mentioning {spec.query}"


def source_url(spec: OpenAlexSpec) -> str:
    return f"{WORKS_API}?{urlencode({'search': spec.query})}"


ADAPTER: ProviderAdapter[OpenAlexSpec] = ProviderAdapter(
    name=PROVIDER_NAME,
    capabilities=Capabilities(daily=False, monthly=True),
    label=label,
    source_url=source_url,
    fetch=fetch_series,
)
