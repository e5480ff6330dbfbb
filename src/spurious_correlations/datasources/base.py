"""Adapter contract shared by all datasources."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from typing import Any, Generic, TypeVar

from pydantic import BaseModel, ValidationError

from spurious_correlations.aggregation import Series
from spurious_correlations.errors import FetchError
from spurious_correlations.schemas import Granularity

SpecT = TypeVar("SpecT")
ModelT = TypeVar("ModelT", bound=BaseModel)


@dataclass(frozen=True)
class Capabilities:
    """Granularities a provider can serve natively or by aggregation."""

    daily: bool
    monthly: bool = True

    def supports(self, granularity: Granularity) -> bool:
        return self.daily if granularity == Granularity.DAILY else self.monthly


@dataclass(frozen=True)
class ProviderAdapter(Generic[SpecT]):
    """Label, link, capabilities and fetch function for one provider."""

    name: str
    capabilities: Capabilities
    label: Callable[[SpecT], str]
    source_url: Callable[[SpecT], str]
    fetch: Callable[[SpecT, int, Granularity], Series]


def parse_response(model: type[ModelT], payload: Any, *, provider: str) -> ModelT:
    """Validate a decoded JSON payload, turning shape errors into ``FetchError``."""
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        msg = f"unexpected response shape ({exc.error_count()} errors)"
        raise FetchError(provider, message=msg) from exc
