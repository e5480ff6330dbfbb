"""Indicator response models.

The payload is a two-element JSON array ``[page_meta, rows]``; errors come
back as ``[{"message": [...]}]`` with HTTP 200.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class IndicatorRow(BaseModel):
    model_config = ConfigDict(extra="ignore")

    date: str
    value: float | None = None
    countryiso3code: str | None = None


class ErrorEnvelope(BaseModel):
    model_config = ConfigDict(extra="ignore")

    message: list[dict[str, Any]] = Field(default_factory=list)

    def text(self) -> str:
        parts = [str(m.get("value") or m.get("key") or m) for m in self.message]
        return "; ".join(parts) or "request unsuccessful"


class IndicatorPage(BaseModel):
    """The ``rows`` half of the payload."""

    rows: list[IndicatorRow] = Field(default_factory=list)
