"""External data source integrations.

Each subdirectory is one upstream API with a consistent structure:

    datasources/{name}/
    ├── __init__.py       # Public API re-exports, incl. ADAPTER
    ├── client.py         # API URLs, constants
    ├── models.py         # Pydantic models for API responses
    └── {feature}.py      # Request + normalization into a time-key series

Every adapter satisfies the same contract (``base.ProviderAdapter``)::

    label(spec) -> str
    source_url(spec) -> str
    capabilities.supports(granularity) -> bool
    fetch(spec, months_back, granularity) -> dict[str, float]

``fetch`` raises ``FetchError`` on any upstream failure and returns an empty
dict when the upstream simply has no data in the window.

Adding a new datasource
-----------------------
1. Add a ``Provider`` member and a frozen spec model in ``schemas.py``
   (extend the ``QuerySpec`` union).

2. Create ``datasources/{name}/`` with the files above. Request through the
   shared session and parse into a response model::

       from spurious_correlations.datasources.base import parse_response
       from spurious_correlations.services.http import get_json

       def fetch_something(...) -> SomethingResponse:
           payload = get_json(API_URL, provider=PROVIDER_NAME, params={...})
           return parse_response(SomethingResponse, payload, provider=PROVIDER_NAME)

   Reduce finer-than-monthly data with ``aggregation.aggregate_mean`` or
   ``aggregate_sum``; difference running totals with ``cumulative_to_daily``.

3. Export ``ADAPTER`` and register it in ``registry.ADAPTERS`` (import fails
   until you do).

4. Add specs to ``pool.py`` and tests in ``tests/test_{name}.py``.
"""
