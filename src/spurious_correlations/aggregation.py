"""Pure reducers from daily data to normalized series (no I/O).

Dates may be ISO (``2024-03-15``) or compact (``20240315``); month buckets are
the first six digits after stripping dashes. Missing and non-finite values
are skipped, never counted as zero.
"""

from __future__ import annotations

import math
from collections.abc import Iterable, Sequence

#: Normalized series: time key -> value.
Series = dict[str, float]


def is_finite_number(value: object) -> bool:
    """True for real, finite ints and floats (bools excluded)."""
    if value is None or isinstance(value, bool):
        return False
    if not isinstance(value, int | float):
        return False
    return math.isfinite(value)


def _month_of(date_str: str) -> str:
    return date_str.replace("-", "")[:6]


def aggregate_mean(dates: Sequence[str], values: Sequence[float | None]) -> Series:
    """Average daily values into monthly buckets.

    Divides by the number of values actually present in each month, not by
    the number of days in it.
    """
    sums: dict[str, float] = {}
    counts: dict[str, int] = {}
    for date_str, value in zip(dates, values, strict=False):
        if not is_finite_number(value):
            continue
        month = _month_of(date_str)
        sums[month] = sums.get(month, 0.0) + float(value)  # type: ignore[arg-type]
        counts[month] = counts.get(month, 0) + 1
    return {month: total / counts[month] for month, total in sums.items()}


def aggregate_sum(dates: Sequence[str], values: Sequence[float | None]) -> Series:
    """Sum daily values into monthly buckets."""
    sums: Series = {}
    for date_str, value in zip(dates, values, strict=False):
        if not is_finite_number(value):
            continue
        month = _month_of(date_str)
        sums[month] = sums.get(month, 0.0) + float(value)  # type: ignore[arg-type]
    return sums


def cumulative_to_daily(values: Sequence[float | None]) -> list[float]:
    """
    First differences of a running total.

    Missing entries count as zero. Negative steps (upstream corrections) are
    clamped to zero. The result is one element shorter than the input.

    >>> cumulative_to_daily([5, 5, 8, 6])
    [0.0, 3.0, 0.0]
    """
    deltas: list[float] = []
    for prev, cur in zip(values, values[1:], strict=False):
        diff = float(cur or 0) - float(prev or 0)
        deltas.append(max(diff, 0.0))
    return deltas


def count_by_key(keys: Iterable[str]) -> Series:
    """Number of occurrences of each key."""
    counts: Series = {}
    for key in keys:
        counts[key] = counts.get(key, 0.0) + 1
    return counts
