"""USGS FDSN event web service constants.

API docs: https://earthquake.usgs.gov/fdsnws/event/1/
"""

PROVIDER_NAME = "USGS"

FDSN_EVENT_API = "https://earthquake.usgs.gov/fdsnws/event/1/query"
DOCS_URL = "https://earthquake.usgs.gov/fdsnws/event/1/"
