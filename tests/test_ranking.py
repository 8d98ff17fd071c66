"""Tests for angle ranking."""
import math

import pytest

from conftest import FIVE_VECTOR_THETAS
from vecangle.errors import DimensionMismatch
from vecangle.pairs import pairwise_elts
from vecangle.ranking import AngleResult, rank_pairs, theta_sort
from vecangle.vector import Vector, theta


class TestReferenceAngles:

    def test_enumeration_order_angles(self, five_vectors):
        pairs = pairwise_elts(five_vectors)
        for (a, b), expected in zip(pairs, FIVE_VECTOR_THETAS):
            assert theta(a, b) == pytest.approx(expected, abs=1e-5)


class TestRankPairs:

    def test_count(self, five_vectors):
        assert len(rank_pairs(five_vectors)) == 10

    def test_ascending(self, five_vectors):
        results = rank_pairs(five_vectors)
        thetas = [r.theta for r in results]
        assert thetas == sorted(thetas)

    def test_expected_order(self, five_vectors):
        results = rank_pairs(five_vectors)
        order = [(r.first_index, r.second_index) for r in results]
        assert order == [
            (3, 4), (2, 3), (2, 4), (1, 2), (1, 3),
            (1, 4), (0, 1), (0, 2), (0, 3), (0, 4),
        ]

    def test_result_fields(self, five_vectors):
        best = rank_pairs(five_vectors)[0]
        assert isinstance(best, AngleResult)
        assert best.first == five_vectors[3]
        assert best.second == five_vectors[4]
        assert best.pair == (five_vectors[3], five_vectors[4])
        assert best.theta == pytest.approx(0.0158359, abs=1e-6)

    def test_cached_theta_matches(self, five_vectors):
        for r in rank_pairs(five_vectors):
            assert r.theta == theta(r.first, r.second)

    def test_ties_keep_enumeration_order(self, axis_vectors):
        # (0,3) and (1,2) are parallel; the other four are orthogonal
        results = rank_pairs(axis_vectors)
        order = [(r.first_index, r.second_index) for r in results]
        assert order == [(0, 3), (1, 2), (0, 1), (0, 2), (1, 3), (2, 3)]

    def test_tie_order_reproducible(self, axis_vectors):
        first = [(r.first_index, r.second_index) for r in rank_pairs(axis_vectors)]
        second = [(r.first_index, r.second_index) for r in rank_pairs(list(axis_vectors))]
        assert first == second

    def test_nan_last(self):
        vectors = [Vector([0, 0]), Vector([1, 0]), Vector([0, 1])]
        with pytest.warns(RuntimeWarning):
            results = rank_pairs(vectors)
        order = [(r.first_index, r.second_index) for r in results]
        assert order == [(1, 2), (0, 1), (0, 2)]
        assert results[0].theta == pytest.approx(math.pi / 2)
        assert math.isnan(results[1].theta)
        assert math.isnan(results[2].theta)

    def test_empty_and_single(self):
        assert rank_pairs([]) == []
        assert rank_pairs([Vector([1, 2, 3])]) == []

    def test_mismatch_aborts(self):
        vectors = [Vector([1, 2]), Vector([3, 4]), Vector([5, 6, 7])]
        with pytest.raises(DimensionMismatch):
            rank_pairs(vectors)


class TestThetaSort:

    def test_returns_pairs(self, five_vectors):
        result = theta_sort(five_vectors)
        assert len(result) == 10
        assert result[0] == (five_vectors[3], five_vectors[4])
        assert result[-1] == (five_vectors[0], five_vectors[4])

    def test_non_decreasing(self, five_vectors):
        last = 0.0
        for a, b in theta_sort(five_vectors):
            curr = theta(a, b)
            assert last <= curr
            last = curr

    def test_non_decreasing_mixed_signs(self):
        vectors = [
            Vector([1, 0, 0]), Vector([-1, 0.5, 2]), Vector([0.3, -7, 1]),
            Vector([2, 2, 2]), Vector([-1, -1, -1]), Vector([0, 0, 1e-3]),
        ]
        thetas = [theta(a, b) for a, b in theta_sort(vectors)]
        assert len(thetas) == 15
        assert all(x <= y for x, y in zip(thetas, thetas[1:]))
