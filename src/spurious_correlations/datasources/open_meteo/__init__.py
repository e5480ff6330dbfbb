"""Open-Meteo historical weather data source.

Daily ERA5 reanalysis values for any point (free, no API key); monthly output
is the mean of the daily values.

Public API:
  - archive: fetch_archive_daily, fetch_series, ADAPTER
  - models: ArchiveDaily, ArchiveResponse
  - client: API URL
"""

from spurious_correlations.datasources.open_meteo.archive import (
    ADAPTER,
    fetch_archive_daily,
    fetch_series,
)
from spurious_correlations.datasources.open_meteo.client import ERA5_ARCHIVE_API
from spurious_correlations.datasources.open_meteo.models import ArchiveDaily, ArchiveResponse

__all__ = [
    "ADAPTER",
    "ERA5_ARCHIVE_API",
    "ArchiveDaily",
    "ArchiveResponse",
    "fetch_archive_daily",
    "fetch_series",
]
