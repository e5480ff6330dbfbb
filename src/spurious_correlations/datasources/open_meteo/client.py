"""Open-Meteo API client constants.

API docs: https://open-meteo.com/en/docs/historical-weather-api
"""

PROVIDER_NAME = "Open-Meteo"

ERA5_ARCHIVE_API = "https://archive-api.open-meteo.com/v1/era5"
DOCS_URL = "https://open-meteo.com/en/docs"

# Keys are calendar days in this zone
TIMEZONE = "UTC"
