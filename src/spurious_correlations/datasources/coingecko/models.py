"""Market-chart response models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class MarketChartResponse(BaseModel):
    """Each series is a list of ``[unix_ms, value]`` pairs."""

    model_config = ConfigDict(extra="ignore")

    prices: list[tuple[float, float | None]] = Field(default_factory=list)
    market_caps: list[tuple[float, float | None]] = Field(default_factory=list)
    total_volumes: list[tuple[float, float | None]] = Field(default_factory=list)
