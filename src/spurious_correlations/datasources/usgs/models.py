"""GeoJSON event response models (only the fields we read)."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class FeatureProperties(BaseModel):
    model_config = ConfigDict(extra="ignore")

    time: int | None = Field(default=None, description="Origin time, unix ms")
    mag: float | None = None
    place: str | None = None


class Feature(BaseModel):
    model_config = ConfigDict(extra="ignore")

    id: str | None = None
    properties: FeatureProperties | None = None


class FeatureCollection(BaseModel):
    model_config = ConfigDict(extra="ignore")

    features: list[Feature] = Field(default_factory=list)
