"""
Domain models for spurious correlations.

Pydantic models for query specifications and engine outputs.
These define the canonical schema - adapters normalize API responses into
plain ``time key -> value`` series, and the engine emits ``PairResult``.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from enum import StrEnum
from typing import Annotated, Any, Literal

from pydantic import BaseModel, ConfigDict, Field, TypeAdapter

# =============================================================================
# Enums
# =============================================================================


class Granularity(StrEnum):
    """Time-key resolution of a series."""

    MONTHLY = "monthly"
    DAILY = "daily"


class Provider(StrEnum):
    """Upstream data providers, one adapter each."""

    WIKIPEDIA = "wp"
    OPEN_METEO = "open_meteo"
    EXCHANGE_RATE = "exchangerate"
    COINGECKO = "coingecko"
    OPENALEX = "openalex"
    DISEASE_SH = "disease_sh"
    USGS_QUAKES = "usgs_quakes"
    WORLD_BANK = "worldbank"


# =============================================================================
# Query specifications
# =============================================================================


class _Spec(BaseModel):
    """Base for query specifications: immutable, compared by value."""

    model_config = ConfigDict(frozen=True, str_strip_whitespace=True, extra="forbid")


class WikipediaSpec(_Spec):
    """English Wikipedia pageviews for one article."""

    provider: Literal["wp"] = "wp"
    title: str = Field(..., min_length=1)


class OpenMeteoSpec(_Spec):
    """Daily ERA5 weather variable at a point."""

    provider: Literal["open_meteo"] = "open_meteo"
    lat: float = Field(..., ge=-90, le=90)
    lon: float = Field(..., ge=-180, le=180)
    variable: str = Field(..., description="Open-Meteo daily variable, e.g. precipitation_sum")
    label: str | None = None


class ExchangeRateSpec(_Spec):
    """Daily exchange rate of ``base`` in units of ``symbol``."""

    provider: Literal["exchangerate"] = "exchangerate"
    base: str = Field(..., min_length=3, max_length=3)
    symbol: str = Field(..., min_length=3, max_length=3)


class CoinGeckoSpec(_Spec):
    """Cryptocurrency price history."""

    provider: Literal["coingecko"] = "coingecko"
    coin_id: str
    vs_currency: str = "usd"
    coin_name: str | None = None


class OpenAlexSpec(_Spec):
    """Scholarly works matching a search query, counted per publication year."""

    provider: Literal["openalex"] = "openalex"
    query: str = Field(..., min_length=1)


class DiseaseShSpec(_Spec):
    """COVID-19 cumulative timeline for a country (differenced to daily)."""

    provider: Literal["disease_sh"] = "disease_sh"
    country: str
    field: Literal["cases", "deaths", "recovered"] = "cases"


class UsgsQuakesSpec(_Spec):
    """Worldwide earthquakes at or above a magnitude."""

    provider: Literal["usgs_quakes"] = "usgs_quakes"
    min_magnitude: float = Field(..., ge=0)


class WorldBankSpec(_Spec):
    """Annual World Bank indicator for a country."""

    provider: Literal["worldbank"] = "worldbank"
    country: str
    indicator: str
    label: str | None = None


QuerySpec = Annotated[
    WikipediaSpec
    | OpenMeteoSpec
    | ExchangeRateSpec
    | CoinGeckoSpec
    | OpenAlexSpec
    | DiseaseShSpec
    | UsgsQuakesSpec
    | WorldBankSpec,
    Field(discriminator="provider"),
]

_spec_adapter: TypeAdapter[QuerySpec] = TypeAdapter(QuerySpec)


def parse_spec(data: Mapping[str, Any]) -> QuerySpec:
    """Validate an untyped mapping (e.g. from JSON) into its spec variant."""
    return _spec_adapter.validate_python(dict(data))


# =============================================================================
# Engine outputs
# =============================================================================


class AlignedPair(BaseModel):
    """Two series restricted to their shared keys, chronologically sorted."""

    model_config = ConfigDict(frozen=True)

    time_keys: tuple[str, ...] = ()
    xs: tuple[float, ...] = ()
    ys: tuple[float, ...] = ()

    def __len__(self) -> int:
        return len(self.time_keys)


class LinearFit(BaseModel):
    """Least-squares line ``y = slope * x + intercept``."""

    model_config = ConfigDict(frozen=True)

    slope: float
    intercept: float

    def predict(self, x: float) -> float:
        return self.slope * x + self.intercept


class PlannedPair(BaseModel):
    """Two specifications to compare, with the granularity both support."""

    model_config = ConfigDict(frozen=True)

    spec_a: QuerySpec
    spec_b: QuerySpec
    granularity: Granularity = Granularity.MONTHLY


class PairResult(BaseModel):
    """Render-ready outcome of one pair, successful or failed."""

    model_config = ConfigDict(frozen=True)

    label_a: str
    label_b: str
    source_a: str
    source_b: str
    granularity: Granularity
    time_keys: tuple[str, ...] = ()
    labels: tuple[str, ...] = ()
    xs: tuple[float, ...] = ()
    ys: tuple[float, ...] = ()
    r: float = math.nan
    fit: LinearFit | None = None
    error: str | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def r_defined(self) -> bool:
        """False when r is the not-a-number sentinel (n < 3 or zero variance)."""
        return math.isfinite(self.r)

    @property
    def r_display(self) -> str:
        return f"{self.r:.3f}" if self.r_defined else "n/a"

    @property
    def title(self) -> str:
        return f"{self.label_a} vs {self.label_b}"
