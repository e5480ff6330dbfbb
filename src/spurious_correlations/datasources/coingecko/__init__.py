"""CoinGecko cryptocurrency price data source.

Public API:
  - market_chart: fetch_market_chart, lookback_days, fetch_series, ADAPTER
  - models: MarketChartResponse
"""

from spurious_correlations.datasources.coingecko.client import COINS_API
from spurious_correlations.datasources.coingecko.market_chart import (
    ADAPTER,
    fetch_market_chart,
    fetch_series,
    lookback_days,
)
from spurious_correlations.datasources.coingecko.models import MarketChartResponse

__all__ = [
    "ADAPTER",
    "COINS_API",
    "MarketChartResponse",
    "fetch_market_chart",
    "fetch_series",
    "lookback_days",
]
