"""
vecangle - pairwise angles between row vectors.

Reads whitespace-delimited rows of floats, treats each row as a vector,
and ranks every unique pair of vectors by the angle between them.

    text lines → ingest → vectors → pairwise_elts → pairs → theta_sort → ranked pairs

Usage:
    from vecangle import read_vectors, rank_pairs
    results = rank_pairs(read_vectors("vectors.txt"))
"""

__version__ = "1.0.0"

from vecangle.errors import (
    VecAngleError,
    DimensionMismatch,
    MalformedLine,
    InputUnavailable,
    ConfigError,
)
from vecangle.vector import Vector, dot, theta, angle
from vecangle.ingest import ingest_vectors, read_vectors
from vecangle.pairs import pair_indices, pairwise_elts
from vecangle.ranking import AngleResult, rank_pairs, theta_sort

__all__ = [
    '__version__',
    # Errors
    'VecAngleError',
    'DimensionMismatch',
    'MalformedLine',
    'InputUnavailable',
    'ConfigError',
    # Vector
    'Vector',
    'dot',
    'theta',
    'angle',
    # Ingest
    'ingest_vectors',
    'read_vectors',
    # Pairs
    'pair_indices',
    'pairwise_elts',
    # Ranking
    'AngleResult',
    'rank_pairs',
    'theta_sort',
]
