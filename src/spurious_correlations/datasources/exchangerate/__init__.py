"""ExchangeRate.host currency time-series data source.

Public API:
  - timeseries: fetch_timeseries, fetch_series, ADAPTER
  - models: TimeseriesResponse
"""

from spurious_correlations.datasources.exchangerate.client import TIMESERIES_API
from spurious_correlations.datasources.exchangerate.models import TimeseriesResponse
from spurious_correlations.datasources.exchangerate.timeseries import (
    ADAPTER,
    fetch_series,
    fetch_timeseries,
)

__all__ = ["ADAPTER", "TIMESERIES_API", "TimeseriesResponse", "fetch_series", "fetch_timeseries"]
