"""USGS earthquake catalog data source.

Counts catalogued events at or above a magnitude per day or per month.

Public API:
  - events: fetch_events, fetch_series, ADAPTER
  - models: Feature, FeatureCollection, FeatureProperties
"""

from spurious_correlations.datasources.usgs.client import FDSN_EVENT_API
from spurious_correlations.datasources.usgs.events import ADAPTER, fetch_events, fetch_series
from spurious_correlations.datasources.usgs.models import (
    Feature,
    FeatureCollection,
    FeatureProperties,
)

__all__ = [
    "ADAPTER",
    "FDSN_EVENT_API",
    "Feature",
    "FeatureCollection",
    "FeatureProperties",
    "fetch_events",
    "fetch_series",
]
