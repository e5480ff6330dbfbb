"""Historical timeline response models."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict

#: Date string (M/D/YY) -> running total
Timeline = dict[str, float | None]


class HistoricalResponse(BaseModel):
    """Per-country payloads nest fields under ``timeline``; the global
    endpoint puts ``cases``/``deaths``/``recovered`` at the top level."""

    model_config = ConfigDict(extra="allow")

    country: str | None = None
    timeline: dict[str, Timeline] | None = None

    def field_timeline(self, field: str) -> Timeline:
        if self.timeline and field in self.timeline:
            return self.timeline[field]
        found = (self.model_extra or {}).get(field)
        return found if isinstance(found, dict) else {}
