"""Provider dispatch table.

Maps every ``Provider`` to its adapter. The table is checked for
completeness at import, so adding a ``Provider`` member without an adapter
fails immediately rather than at fetch time.
"""

from __future__ import annotations

from typing import Any

from spurious_correlations.datasources import (
    coingecko,
    disease_sh,
    exchangerate,
    open_meteo,
    openalex,
    usgs,
    wikipedia,
    worldbank,
)
from spurious_correlations.datasources.base import ProviderAdapter, Series
from spurious_correlations.errors import UnknownProviderError
from spurious_correlations.schemas import Granularity, Provider, QuerySpec

ADAPTERS: dict[Provider, ProviderAdapter[Any]] = {
    Provider.WIKIPEDIA: wikipedia.ADAPTER,
    Provider.OPEN_METEO: open_meteo.ADAPTER,
    Provider.EXCHANGE_RATE: exchangerate.ADAPTER,
    Provider.COINGECKO: coingecko.ADAPTER,
    Provider.OPENALEX: openalex.ADAPTER,
    Provider.DISEASE_SH: disease_sh.ADAPTER,
    Provider.USGS_QUAKES: usgs.ADAPTER,
    Provider.WORLD_BANK: worldbank.ADAPTER,
}

_missing = set(Provider) - set(ADAPTERS)
if _missing:
    raise UnknownProviderError(", ".join(sorted(_missing)))


def adapter_for(spec: QuerySpec) -> ProviderAdapter[Any]:
    """Look up the adapter for a spec's provider tag.

    Raises:
        UnknownProviderError: The tag names no known provider.
    """
    try:
        return ADAPTERS[Provider(spec.provider)]
    except (KeyError, ValueError):
        raise UnknownProviderError(spec.provider) from None


def spec_label(spec: QuerySpec) -> str:
    return adapter_for(spec).label(spec)


def spec_source(spec: QuerySpec) -> str:
    """External "more info" link for a spec."""
    return adapter_for(spec).source_url(spec)


def supports_granularity(spec: QuerySpec, granularity: Granularity) -> bool:
    return adapter_for(spec).capabilities.supports(granularity)


def fetch_series(spec: QuerySpec, months_back: int, granularity: Granularity) -> Series:
    """
    Fetch and normalize one series.

    A granularity the provider cannot serve is downgraded to monthly.

    Raises:
        FetchError: The upstream call failed or returned an invalid payload.
    """
    adapter = adapter_for(spec)
    if not adapter.capabilities.supports(granularity):
        granularity = Granularity.MONTHLY
    return adapter.fetch(spec, months_back, granularity)
