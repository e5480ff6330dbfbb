"""Spurious Correlations - pair random public time series and measure how well they agree.

Architecture::

    schemas.py     Query specifications (one frozen model per provider) and results
    timekeys.py    YYYYMM / YYYYMMDD keys and lookback windows
    aggregation.py Daily -> monthly reducers, cumulative differencing
    datasources/   One adapter per upstream API + the provider registry
    analysis/      Alignment on shared keys, Pearson r, least-squares fit
    pairs.py       Random unique pair planning over a spec pool
    flows/         Prefect orchestration (fetch each pair concurrently, compare)
    services/      Shared HTTP session

Data flow: pool -> pairs -> datasources (fetch + normalize) -> analysis -> PairResult

Extension points: see each package's docstring for step-by-step guides:
  - New data source:   datasources/__init__.py
"""

__version__ = "0.1.0"

from spurious_correlations.config import Settings
from spurious_correlations.schemas import PairResult, QuerySpec

__all__ = ["PairResult", "QuerySpec", "Settings", "__version__"]
