"""Descriptive statistics over aligned arrays (pure, never raise).

Both functions read ``min(len(xs), len(ys))`` elements; trailing extras in
the longer sequence are ignored. Undefined results are ``math.nan``, never 0.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

from spurious_correlations.schemas import LinearFit

MIN_SAMPLES = 3


def _is_constant(values: Sequence[float]) -> bool:
    # Exact comparison; sums of products keep rounding residue
    return min(values) == max(values)


def pearson_r(xs: Sequence[float], ys: Sequence[float]) -> float:
    """
    Pearson correlation coefficient.

    Returns NaN when fewer than three samples are available, or when either
    series is constant (zero variance).
    """
    n = min(len(xs), len(ys))
    if n < MIN_SAMPLES:
        return math.nan
    if _is_constant(xs[:n]) or _is_constant(ys[:n]):
        return math.nan

    sum_x = sum_y = sum_xx = sum_yy = sum_xy = 0.0
    for x, y in zip(xs[:n], ys[:n], strict=True):
        sum_x += x
        sum_y += y
        sum_xx += x * x
        sum_yy += y * y
        sum_xy += x * y

    numerator = n * sum_xy - sum_x * sum_y
    variance_product = (n * sum_xx - sum_x * sum_x) * (n * sum_yy - sum_y * sum_y)
    if variance_product <= 0:
        return math.nan

    r = numerator / math.sqrt(variance_product)
    return max(-1.0, min(1.0, r))


def linear_regression(xs: Sequence[float], ys: Sequence[float]) -> LinearFit:
    """
    Ordinary least squares ``y = slope * x + intercept``.

    When every x is identical the slope is 0 and the intercept is mean(y).
    Empty input gives slope 0, intercept 0.
    """
    n = min(len(xs), len(ys))
    sum_x = sum_y = sum_xx = sum_xy = 0.0
    for x, y in zip(xs[:n], ys[:n], strict=True):
        sum_x += x
        sum_y += y
        sum_xx += x * x
        sum_xy += x * y

    denominator = n * sum_xx - sum_x * sum_x
    if n == 0 or denominator == 0 or _is_constant(xs[:n]):
        slope = 0.0
    else:
        slope = (n * sum_xy - sum_x * sum_y) / denominator
    intercept = 0.0 if n == 0 else (sum_y - slope * sum_x) / n
    return LinearFit(slope=slope, intercept=intercept)
