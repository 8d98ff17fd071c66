"""
Angle ranking: pairs ordered by ascending theta.

Each pair's angle is computed exactly once and cached on its
AngleResult. The sort is stable, so equal angles keep enumeration
order. NaN angles (a zero vector in the pair) go after every finite
angle, still in enumeration order.

A DimensionMismatch from any pair aborts the whole ranking.
"""

import logging
import math
from dataclasses import dataclass
from typing import List, Sequence, Tuple

from vecangle.pairs import pair_indices
from vecangle.vector import Vector, theta

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AngleResult:
    """One ranked pair."""
    first: Vector
    second: Vector
    theta: float
    first_index: int   # position of `first` in the input sequence
    second_index: int

    @property
    def pair(self) -> Tuple[Vector, Vector]:
        return (self.first, self.second)


def _sort_key(result: AngleResult) -> Tuple[bool, float]:
    # (False, x) < (True, nan); NaN keys compare equal to each other.
    return (math.isnan(result.theta), result.theta)


def rank_pairs(vectors: Sequence[Vector]) -> List[AngleResult]:
    """
    Compute theta for every unique pair and sort ascending.

    Parameters
    ----------
    vectors : sequence of Vector
        Same-dimension vectors, e.g. from ``ingest_vectors``.

    Returns
    -------
    list of AngleResult — C(N, 2) entries, non-decreasing theta.
    """
    results = [
        AngleResult(
            first=vectors[i],
            second=vectors[j],
            theta=theta(vectors[i], vectors[j]),
            first_index=i,
            second_index=j,
        )
        for i, j in pair_indices(len(vectors))
    ]
    results.sort(key=_sort_key)
    logger.debug("ranked %d pairs from %d vectors", len(results), len(vectors))
    return results


def theta_sort(vectors: Sequence[Vector]) -> List[Tuple[Vector, Vector]]:
    """The pairs of ``vectors`` ordered by theta, ascending."""
    return [r.pair for r in rank_pairs(vectors)]
