"""
Unique pair enumeration.

N vectors → C(N, 2) pairs, (i, j) with i < j, in lexicographic order:

    (0,1) (0,2) ... (0,N-1) (1,2) ... (N-2,N-1)

This order is the tie-break for the angle sort, so it must not change.
"""

from itertools import combinations
from typing import Iterator, List, Sequence, Tuple

from vecangle.vector import Vector


def pair_indices(n: int) -> Iterator[Tuple[int, int]]:
    """Index pairs (i, j), i < j < n, in lexicographic order."""
    return combinations(range(n), 2)


def pairwise_elts(vectors: Sequence[Vector]) -> List[Tuple[Vector, Vector]]:
    """
    All unique pairs of distinct positions in ``vectors``.

    A vector is never paired with its own position; two equal vectors at
    different positions still form a pair.
    """
    return [(vectors[i], vectors[j]) for i, j in pair_indices(len(vectors))]
