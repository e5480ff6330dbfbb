"""OpenAlex scholarly works data source.

Counts works matching a search query per publication year. Annual buckets are
keyed as January of that year, so this source is monthly-only.

Public API:
  - works: fetch_works_by_year, fetch_series, ADAPTER
  - models: GroupByBucket, WorksGroupResponse
"""

from spurious_correlations.datasources.openalex.client import WORKS_API
from spurious_correlations.datasources.openalex.models import GroupByBucket, WorksGroupResponse
from spurious_correlations.datasources.openalex.works import (
    ADAPTER,
    fetch_series,
    fetch_works_by_year,
)

__all__ = [
    "ADAPTER",
    "WORKS_API",
    "GroupByBucket",
    "WorksGroupResponse",
    "fetch_series",
    "fetch_works_by_year",
]
