"""ExchangeRate.host API constants."""

PROVIDER_NAME = "ExchangeRate.host"

TIMESERIES_API = "https://api.exchangerate.host/timeseries"
DOCS_URL = "https://exchangerate.host/#/"
