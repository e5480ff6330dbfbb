"""World Bank API v2 constants.

API docs: https://datahelpdesk.worldbank.org/knowledgebase/articles/889392
"""

PROVIDER_NAME = "World Bank"

INDICATOR_API = "https://api.worldbank.org/v2/country/{country}/indicator/{indicator}"
INDICATOR_PAGE = "https://data.worldbank.org/indicator/"

PER_PAGE = 2000
