"""Pageviews response models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class PageviewItem(BaseModel):
    """One bucket; ``timestamp`` is ``YYYYMMDDHH``."""

    model_config = ConfigDict(extra="ignore")

    timestamp: str
    views: float


class PageviewsResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    items: list[PageviewItem] = Field(default_factory=list)
