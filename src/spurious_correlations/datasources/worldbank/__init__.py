"""World Bank indicators data source.

Annual indicator values for a country, keyed as January of each year
(monthly-only).

Public API:
  - indicators: fetch_indicator, fetch_series, ADAPTER
  - models: IndicatorRow
"""

from spurious_correlations.datasources.worldbank.client import INDICATOR_API
from spurious_correlations.datasources.worldbank.indicators import (
    ADAPTER,
    fetch_indicator,
    fetch_series,
)
from spurious_correlations.datasources.worldbank.models import IndicatorRow

__all__ = ["ADAPTER", "INDICATOR_API", "IndicatorRow", "fetch_indicator", "fetch_series"]
