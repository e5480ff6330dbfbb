"""CoinGecko API constants.

API docs: https://docs.coingecko.com/reference/coins-id-market-chart
"""

PROVIDER_NAME = "CoinGecko"

COINS_API = "https://api.coingecko.com/api/v3/coins"
COIN_PAGE = "https://www.coingecko.com/en/coins/"

# The endpoint takes a day count rather than a date range
MIN_DAYS = 30
MAX_DAYS = 3650
