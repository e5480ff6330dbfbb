"""Wikimedia pageviews data source.

Per-article English Wikipedia views (human agents, all access methods), at
native monthly or daily resolution.

Public API:
  - pageviews: fetch_pageviews, fetch_series, ADAPTER
  - models: PageviewItem, PageviewsResponse
  - client: API URLs, path segments
"""

from spurious_correlations.datasources.wikipedia.client import PAGEVIEWS_API
from spurious_correlations.datasources.wikipedia.models import PageviewItem, PageviewsResponse
from spurious_correlations.datasources.wikipedia.pageviews import (
    ADAPTER,
    fetch_pageviews,
    fetch_series,
)

__all__ = [
    "ADAPTER",
    "PAGEVIEWS_API",
    "PageviewItem",
    "PageviewsResponse",
    "fetch_pageviews",
    "fetch_series",
]
