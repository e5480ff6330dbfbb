"""Wikimedia REST API constants.

API docs: https://wikimedia.org/api/rest_v1/#/Pageviews%20data
"""

PROVIDER_NAME = "Wikimedia pageviews"

PAGEVIEWS_API = "https://wikimedia.org/api/rest_v1/metrics/pageviews/per-article"
ARTICLE_BASE = "https://en.wikipedia.org/wiki/"

# Path segments: /{project}/{access}/{agent}/{article}/{granularity}/{start}/{end}
PROJECT = "en.wikipedia.org"
ACCESS = "all-access"
AGENT = "user"
