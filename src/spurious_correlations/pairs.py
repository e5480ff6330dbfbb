"""Random pair planning over a pool of query specifications.

Pairs are unique by their *unordered* label pair, so "A vs B" and "B vs A"
never both appear in one run, and a spec is never paired with itself.
"""

from __future__ import annotations

import random
from collections.abc import Callable, Sequence

from spurious_correlations.datasources.registry import spec_label, supports_granularity
from spurious_correlations.errors import PairGenerationError
from spurious_correlations.schemas import Granularity, PlannedPair, QuerySpec

MIN_ATTEMPTS = 1000
ATTEMPTS_PER_PAIR = 100


def max_unique_pairs(
    pool: Sequence[QuerySpec],
    label: Callable[[QuerySpec], str] = spec_label,
) -> int:
    """Number of distinct unordered label pairs the pool can produce."""
    n = len({label(spec) for spec in pool})
    return n * (n - 1) // 2


def generate_pairs(
    pool: Sequence[QuerySpec],
    count: int,
    *,
    rng: random.Random | None = None,
    max_attempts: int | None = None,
    label: Callable[[QuerySpec], str] = spec_label,
) -> list[tuple[QuerySpec, QuerySpec]]:
    """
    Draw ``count`` unique pairs uniformly at random.

    Args:
        pool: Specs to draw from.
        count: Number of pairs wanted.
        rng: Random source; pass a seeded ``random.Random`` for reproducible
            runs. Defaults to system entropy.
        max_attempts: Draw budget before giving up. Defaults to
            ``max(1000, 100 * count)``.
        label: Label function used for duplicate detection.

    Raises:
        PairGenerationError: ``count`` exceeds the realizable unique pairs, or
            the draw budget ran out.
    """
    if count <= 0:
        return []
    available = max_unique_pairs(pool, label)
    if count > available:
        msg = f"Requested {count} pairs but the pool only yields {available} unique pairs"
        raise PairGenerationError(msg)

    rng = rng or random.SystemRandom()
    budget = max_attempts
    if budget is None:
        budget = max(MIN_ATTEMPTS, ATTEMPTS_PER_PAIR * count)

    pairs: list[tuple[QuerySpec, QuerySpec]] = []
    seen: set[tuple[str, str]] = set()
    attempts = 0
    while len(pairs) < count:
        if attempts >= budget:
            msg = f"Gave up after {attempts} draws with {len(pairs)} of {count} pairs"
            raise PairGenerationError(msg)
        attempts += 1

        a = pool[rng.randrange(len(pool))]
        b = pool[rng.randrange(len(pool))]
        if a == b:
            continue
        label_a, label_b = label(a), label(b)
        if label_a == label_b:
            continue
        key = (label_a, label_b) if label_a < label_b else (label_b, label_a)
        if key in seen:
            continue
        seen.add(key)
        pairs.append((a, b))
    return pairs


def pair_granularity(a: QuerySpec, b: QuerySpec, requested: Granularity) -> Granularity:
    """The requested granularity if both providers support it, else monthly."""
    if supports_granularity(a, requested) and supports_granularity(b, requested):
        return requested
    return Granularity.MONTHLY


def plan_pairs(
    pool: Sequence[QuerySpec],
    count: int,
    requested: Granularity,
    *,
    rng: random.Random | None = None,
) -> list[PlannedPair]:
    """Generate pairs and attach each pair's effective granularity."""
    return [
        PlannedPair(spec_a=a, spec_b=b, granularity=pair_granularity(a, b, requested))
        for a, b in generate_pairs(pool, count, rng=rng)
    ]
