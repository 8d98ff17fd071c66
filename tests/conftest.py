"""Shared fixtures: the five-vector reference dataset."""
import pytest

from vecangle.vector import Vector


FIVE_VECTOR_TEXT = "1 2 3\n4 5 6\n7 8 9\n10 11 12\n13 14 15"

# Angles for pairwise_elts order, computed in Mathematica.
FIVE_VECTOR_THETAS = [
    0.225726, 0.285887, 0.313506, 0.329341,
    0.0601607, 0.0877795, 0.103615,
    0.0276188, 0.0434547,
    0.0158359,
]


@pytest.fixture
def five_vectors():
    return [
        Vector([1, 2, 3]),
        Vector([4, 5, 6]),
        Vector([7, 8, 9]),
        Vector([10, 11, 12]),
        Vector([13, 14, 15]),
    ]


@pytest.fixture
def axis_vectors():
    """Exact ties: unit/scaled axes give angles of exactly 0 and π/2."""
    return [
        Vector([1, 0]),
        Vector([0, 1]),
        Vector([0, 2]),
        Vector([2, 0]),
    ]
