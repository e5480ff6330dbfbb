"""disease.sh API constants.

API docs: https://disease.sh/docs/#/COVID-19%3A%20JHUCSSE
"""

PROVIDER_NAME = "disease.sh"

HISTORICAL_API = "https://disease.sh/v3/covid-19/historical"

MIN_DAYS = 30

# Timeline dates look like 1/22/20
TIMELINE_DATE_FORMAT = "%m/%d/%y"
