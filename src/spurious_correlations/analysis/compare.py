"""Compare two fetched series: the last step before presentation."""

from __future__ import annotations

from collections.abc import Mapping

from spurious_correlations.analysis.align import align, require_overlap
from spurious_correlations.analysis.stats import linear_regression, pearson_r
from spurious_correlations.datasources.registry import spec_label, spec_source
from spurious_correlations.schemas import Granularity, PairResult, PlannedPair, QuerySpec
from spurious_correlations.timekeys import display_label


def compare_series(
    spec_a: QuerySpec,
    spec_b: QuerySpec,
    series_a: Mapping[str, float],
    series_b: Mapping[str, float],
    granularity: Granularity,
) -> PairResult:
    """
    Align two series and compute r and the fit line.

    Raises:
        InsufficientOverlapError: Fewer than three shared keys. Statistics
            are not computed in that case.
    """
    aligned = require_overlap(align(series_a, series_b))
    return PairResult(
        label_a=spec_label(spec_a),
        label_b=spec_label(spec_b),
        source_a=spec_source(spec_a),
        source_b=spec_source(spec_b),
        granularity=granularity,
        time_keys=aligned.time_keys,
        labels=tuple(display_label(k, granularity) for k in aligned.time_keys),
        xs=aligned.xs,
        ys=aligned.ys,
        r=pearson_r(aligned.xs, aligned.ys),
        fit=linear_regression(aligned.xs, aligned.ys),
    )


def failed_result(pair: PlannedPair, error: Exception) -> PairResult:
    """A result that carries only labels, links and the failure message."""
    return PairResult(
        label_a=spec_label(pair.spec_a),
        label_b=spec_label(pair.spec_b),
        source_a=spec_source(pair.spec_a),
        source_b=spec_source(pair.spec_b),
        granularity=pair.granularity,
        error=str(error),
    )
