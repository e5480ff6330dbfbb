"""Alignment and statistics over normalized series.

Dependency rule: analysis/ never fetches data. It takes series (plain
``time key -> value`` dicts) and returns value objects from ``schemas``.

Modules:
  - align: shared-key intersection -> AlignedPair, minimum-overlap check
  - stats: Pearson r, least-squares line
  - compare: align + stats for one pair of specs -> PairResult
"""

from spurious_correlations.analysis.align import (
    MIN_OVERLAP,
    align,
    intersect_keys,
    require_overlap,
)
from spurious_correlations.analysis.compare import compare_series, failed_result
from spurious_correlations.analysis.stats import linear_regression, pearson_r

__all__ = [
    "MIN_OVERLAP",
    "align",
    "compare_series",
    "failed_result",
    "intersect_keys",
    "linear_regression",
    "pearson_r",
    "require_overlap",
]
