"""Works group-by response models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class GroupByBucket(BaseModel):
    """One ``group_by`` bucket; ``key`` is the publication year."""

    model_config = ConfigDict(extra="ignore")

    key: str | int | None = None
    key_display_name: str | None = None
    count: float | None = None


class WorksGroupResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    group_by: list[GroupByBucket] = Field(default_factory=list)
