"""
Prefect flow that renders one batch of correlation pairs.

Pairs are processed one at a time; the two fetches of a pair are submitted
together and run concurrently on the flow's task runner. A ``PairError``
(failed fetch, too little overlap) fails only its own pair.

Run locally:
    python -m spurious_correlations.flows.correlate
"""

from __future__ import annotations

import random
from collections.abc import Sequence

from prefect import flow, task
from prefect.cache_policies import NO_CACHE

from spurious_correlations.analysis import compare_series, failed_result
from spurious_correlations.config import get_settings
from spurious_correlations.datasources import registry
from spurious_correlations.datasources.base import Series
from spurious_correlations.errors import PairError
from spurious_correlations.pairs import plan_pairs
from spurious_correlations.pool import DEFAULT_POOL, load_pool
from spurious_correlations.schemas import Granularity, PairResult, PlannedPair, QuerySpec
from spurious_correlations.timekeys import clamp_months_back


@task(name="fetch-series", retries=0, cache_policy=NO_CACHE, persist_result=False)
def fetch_series(spec: QuerySpec, months_back: int, granularity: Granularity) -> Series:
    """Fetch one normalized series. Fetch-or-fail: no retries."""
    return registry.fetch_series(spec, months_back, granularity)


def correlate_pair(pair: PlannedPair, months_back: int) -> PairResult:
    """Fetch both sides of a pair concurrently, then compare them.

    Must run inside a flow (uses ``task.submit``).

    Raises:
        PairError: Either fetch failed, or the series barely overlap.
    """
    future_a = fetch_series.submit(pair.spec_a, months_back, pair.granularity)
    future_b = fetch_series.submit(pair.spec_b, months_back, pair.granularity)
    # Wait for both before surfacing either failure
    future_a.wait()
    future_b.wait()
    series_a = future_a.result()
    series_b = future_b.result()
    return compare_series(pair.spec_a, pair.spec_b, series_a, series_b, pair.granularity)


def resolve_pool(pool: Sequence[QuerySpec] | None = None) -> Sequence[QuerySpec]:
    """Explicit pool, else the configured pool file, else ``DEFAULT_POOL``."""
    if pool is not None:
        return pool
    settings = get_settings()
    if settings.pool_file is not None:
        return load_pool(settings.pool_file)
    return DEFAULT_POOL


@flow(name="correlate-pairs", log_prints=True)
def correlate_all(
    months_back: int | None = None,
    granularity: Granularity | None = None,
    pair_count: int | None = None,
    seed: int | None = None,
    pool: Sequence[QuerySpec] | None = None,
) -> list[PairResult]:
    """
    Plan ``pair_count`` random pairs and compute a result for each.

    Unset arguments fall back to settings. ``months_back`` is clamped to
    6-120. Pairs are processed sequentially; a pair that fails is recorded
    with its error and the batch continues.
    """
    settings = get_settings()
    months = clamp_months_back(months_back if months_back is not None else settings.months_back)
    requested = granularity or settings.granularity
    count = pair_count if pair_count is not None else settings.pair_count
    seed = seed if seed is not None else settings.seed
    rng = random.Random(seed) if seed is not None else None

    pairs = plan_pairs(resolve_pool(pool), count, requested, rng=rng)
    print(f"Planned {len(pairs)} pairs over {months} months ({requested.value} requested)")

    results: list[PairResult] = []
    for index, pair in enumerate(pairs, start=1):
        try:
            result = correlate_pair(pair, months)
        except PairError as exc:
            result = failed_result(pair, exc)
            print(f"[{index}/{len(pairs)}] {result.title}: failed ({result.error})")
        else:
            print(
                f"[{index}/{len(pairs)}] {result.title}: r = {result.r_display} "
                f"over {len(result.time_keys)} {result.granularity.value} points"
            )
        results.append(result)

    failures = sum(1 for r in results if not r.ok)
    print(f"Done: {len(results) - failures} rendered, {failures} failed")
    return results


if __name__ == "__main__":
    batch = correlate_all()
    print(f"Flow complete: {len(batch)} pairs")
