"""Tests for random pair planning."""

from __future__ import annotations

import random

import pytest

from spurious_correlations.errors import PairGenerationError
from spurious_correlations.pairs import (
    generate_pairs,
    max_unique_pairs,
    pair_granularity,
    plan_pairs,
)
from spurious_correlations.pool import DEFAULT_POOL
from spurious_correlations.schemas import (
    Granularity,
    OpenAlexSpec,
    WikipediaSpec,
    WorldBankSpec,
)

ANIMALS = [WikipediaSpec(title=t) for t in ("Cat", "Llama", "Corgi", "Hamster", "Zombie")]


def _unordered(a: WikipediaSpec, b: WikipediaSpec) -> tuple[str, str]:
    return tuple(sorted((a.title, b.title)))  # type: ignore[return-value]


class TestMaxUniquePairs:
    """Distinct unordered label pairs."""

    def test_five_labels(self) -> None:
        assert max_unique_pairs(ANIMALS) == 10

    def test_duplicate_labels_collapse(self) -> None:
        pool = [WikipediaSpec(title="Cat"), WikipediaSpec(title="Cat"), WikipediaSpec(title="Dog")]
        assert max_unique_pairs(pool) == 1

    def test_empty(self) -> None:
        assert max_unique_pairs([]) == 0


class TestGeneratePairs:
    """Uniqueness, determinism and failure modes."""

    def test_returns_requested_count(self) -> None:
        pairs = generate_pairs(ANIMALS, 6, rng=random.Random(1))
        assert len(pairs) == 6

    def test_no_self_pairs(self) -> None:
        for a, b in generate_pairs(ANIMALS, 10, rng=random.Random(2)):
            assert a != b

    def test_no_duplicates_in_either_order(self) -> None:
        pairs = generate_pairs(ANIMALS, 10, rng=random.Random(3))
        keys = [_unordered(a, b) for a, b in pairs]
        assert len(set(keys)) == len(keys)

    def test_exhausts_pool_exactly(self) -> None:
        pairs = generate_pairs(ANIMALS, 10, rng=random.Random(4))
        assert len({_unordered(a, b) for a, b in pairs}) == 10

    def test_seeded_runs_repeat(self) -> None:
        first = generate_pairs(DEFAULT_POOL, 20, rng=random.Random(42))
        second = generate_pairs(DEFAULT_POOL, 20, rng=random.Random(42))
        assert first == second

    def test_zero_count(self) -> None:
        assert generate_pairs(ANIMALS, 0) == []

    def test_default_rng(self) -> None:
        assert len(generate_pairs(ANIMALS, 3)) == 3

    def test_count_above_available_fails_fast(self) -> None:
        with pytest.raises(PairGenerationError, match="only yields 10"):
            generate_pairs(ANIMALS, 11, rng=random.Random(5))

    def test_single_label_pool(self) -> None:
        with pytest.raises(PairGenerationError):
            generate_pairs([WikipediaSpec(title="Cat")], 1)

    def test_attempt_budget(self) -> None:
        with pytest.raises(PairGenerationError, match="Gave up"):
            generate_pairs(ANIMALS, 2, rng=random.Random(6), max_attempts=0)

    def test_equal_labels_never_paired(self) -> None:
        pool = [WikipediaSpec(title="Cat"), WikipediaSpec(title="Cat"), WikipediaSpec(title="Dog")]
        ((a, b),) = generate_pairs(pool, 1, rng=random.Random(7))
        assert {a.title, b.title} == {"Cat", "Dog"}


class TestPairGranularity:
    """Downgrade to monthly when a side lacks daily data."""

    def test_both_daily(self) -> None:
        a, b = ANIMALS[:2]
        assert pair_granularity(a, b, Granularity.DAILY) == Granularity.DAILY

    @pytest.mark.parametrize(
        "monthly_only",
        [OpenAlexSpec(query="zombie"), WorldBankSpec(country="USA", indicator="SP.POP.TOTL")],
    )
    def test_one_side_monthly_only(self, monthly_only: OpenAlexSpec | WorldBankSpec) -> None:
        granularity = pair_granularity(ANIMALS[0], monthly_only, Granularity.DAILY)
        assert granularity == Granularity.MONTHLY

    def test_monthly_request_stays_monthly(self) -> None:
        a, b = ANIMALS[:2]
        assert pair_granularity(a, b, Granularity.MONTHLY) == Granularity.MONTHLY


class TestPlanPairs:
    """Pairs annotated with their effective granularity."""

    def test_mixed_pool_downgrades(self) -> None:
        pool = [WikipediaSpec(title="Cat"), OpenAlexSpec(query="cat")]
        (planned,) = plan_pairs(pool, 1, Granularity.DAILY, rng=random.Random(8))
        assert planned.granularity == Granularity.MONTHLY

    def test_daily_pool_keeps_daily(self) -> None:
        planned = plan_pairs(ANIMALS, 4, Granularity.DAILY, rng=random.Random(9))
        assert {p.granularity for p in planned} == {Granularity.DAILY}

    def test_seeded_plans_repeat(self) -> None:
        first = plan_pairs(DEFAULT_POOL, 15, Granularity.MONTHLY, rng=random.Random(11))
        second = plan_pairs(DEFAULT_POOL, 15, Granularity.MONTHLY, rng=random.Random(11))
        assert first == second
