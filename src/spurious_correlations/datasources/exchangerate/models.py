"""Time-series response models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class TimeseriesResponse(BaseModel):
    """``rates`` maps ISO date -> {symbol: rate}.

    Failed lookups come back as HTTP 200 with ``success: false`` and an
    ``error`` object.
    """

    model_config = ConfigDict(extra="ignore")

    success: bool | None = None
    base: str | None = None
    rates: dict[str, dict[str, float | None]] = Field(default_factory=dict)
    error: dict[str, Any] | None = None

    def error_message(self) -> str:
        if not self.error:
            return "request unsuccessful"
        return str(self.error.get("info") or self.error.get("type") or self.error)
