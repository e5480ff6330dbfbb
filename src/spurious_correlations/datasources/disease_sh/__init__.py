"""disease.sh COVID-19 historical data source.

The upstream timeline is cumulative; it is differenced into daily counts
(negative corrections clamped to zero) and summed for monthly output.

Public API:
  - historical: fetch_historical, lookback_days, fetch_series, ADAPTER
  - models: HistoricalResponse
"""

from spurious_correlations.datasources.disease_sh.client import HISTORICAL_API
from spurious_correlations.datasources.disease_sh.historical import (
    ADAPTER,
    fetch_historical,
    fetch_series,
    lookback_days,
)
from spurious_correlations.datasources.disease_sh.models import HistoricalResponse

__all__ = [
    "ADAPTER",
    "HISTORICAL_API",
    "HistoricalResponse",
    "fetch_historical",
    "fetch_series",
    "lookback_days",
]
