"""Archive API response models."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ArchiveDaily(BaseModel):
    """Parallel arrays: ``time`` plus one array per requested variable."""

    model_config = ConfigDict(extra="allow")

    time: list[str] = Field(default_factory=list)

    def values(self, variable: str) -> list[Any]:
        """The array for ``variable``, or an empty list when absent."""
        extra = self.model_extra or {}
        found = extra.get(variable)
        return found if isinstance(found, list) else []


class ArchiveResponse(BaseModel):
    model_config = ConfigDict(extra="ignore")

    latitude: float | None = None
    longitude: float | None = None
    daily: ArchiveDaily | None = None
