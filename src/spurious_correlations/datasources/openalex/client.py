"""OpenAlex API constants.

API docs: https://docs.openalex.org/how-to-use-the-api/get-groups-of-entities
"""

PROVIDER_NAME = "OpenAlex"

WORKS_API = "https://api.openalex.org/works"

GROUP_BY = "publication_year"
PER_PAGE = 200

# Publication years lag; widen the window so early years are populated
EXTRA_MONTHS_BACK = 24
