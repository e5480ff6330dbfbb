"""Intersect two series on their common time keys."""

from __future__ import annotations

from collections.abc import Mapping

from spurious_correlations.errors import InsufficientOverlapError
from spurious_correlations.schemas import AlignedPair

#: Fewest shared points for a pair to be usable
MIN_OVERLAP = 3


def intersect_keys(a: Mapping[str, float], b: Mapping[str, float]) -> list[str]:
    """Keys present in both series, ascending (i.e. chronological)."""
    return sorted(a.keys() & b.keys())


def align(a: Mapping[str, float], b: Mapping[str, float]) -> AlignedPair:
    """Parallel value arrays over the shared keys of ``a`` and ``b``."""
    keys = intersect_keys(a, b)
    return AlignedPair(
        time_keys=tuple(keys),
        xs=tuple(a[k] for k in keys),
        ys=tuple(b[k] for k in keys),
    )


def require_overlap(aligned: AlignedPair, minimum: int = MIN_OVERLAP) -> AlignedPair:
    """Return ``aligned`` unchanged, or raise if it has fewer than ``minimum`` keys."""
    if len(aligned.time_keys) < minimum:
        raise InsufficientOverlapError(found=len(aligned.time_keys), required=minimum)
    return aligned
