"""Per-article pageview counts."""

from __future__ import annotations

from urllib.parse import quote

from spurious_correlations.datasources.base import (
    Capabilities,
    ProviderAdapter,
    Series,
    parse_response,
)
from spurious_correlations.datasources.wikipedia.client import (
    ACCESS,
    AGENT,
    ARTICLE_BASE,
    PAGEVIEWS_API,
    PROJECT,
    PROVIDER_NAME,
)
from spurious_correlations.datasources.wikipedia.models import PageviewsResponse
from spurious_correlations.schemas import Granularity, WikipediaSpec
from spurious_correlations.services.http import get_json
from spurious_correlations.timekeys import key_length, month_range


def _article_path(title: str) -> str:
    return quote(title.replace(" ", "_"), safe="")


def fetch_pageviews(
    title: str,
    granularity: Granularity,
    start: str,
    end: str,
) -> PageviewsResponse:
    """
    Fetch pageviews for one article over an inclusive key range.

    Args:
        title: Article title (spaces or underscores).
        granularity: ``monthly`` or ``daily`` buckets.
        start: First bucket, ``YYYYMMDD``.
        end: Last bucket, ``YYYYMMDD``.

    Raises:
        FetchError: Non-2xx status (404 when the article has no data).
    """
    url = "/".join(
        [
            PAGEVIEWS_API,
            PROJECT,
            ACCESS,
            AGENT,
            _article_path(title),
            granularity.value,
            start,
            end,
        ]
    )
    payload = get_json(url, provider=PROVIDER_NAME)
    return parse_response(PageviewsResponse, payload, provider=PROVIDER_NAME)


def fetch_series(spec: WikipediaSpec, months_back: int, granularity: Granularity) -> Series:
    """Pageviews keyed by month or day, each timestamp truncated to the key length."""
    key_range = month_range(months_back, granularity)
    data = fetch_pageviews(spec.title, granularity, key_range.start, key_range.end)
    size = key_length(granularity)
    return {item.timestamp[:size]: item.views for item in data.items}


def label(spec: WikipediaSpec) -> str:
    return spec.title


def source_url(spec: WikipediaSpec) -> str:
    return ARTICLE_BASE + _article_path(spec.title)


ADAPTER: ProviderAdapter[WikipediaSpec] = ProviderAdapter(
    name=PROVIDER_NAME,
    capabilities=Capabilities(daily=True, monthly=True),
    label=label,
    source_url=source_url,
    fetch=fetch_series,
)
