"""
Unit tests for whole-space detection and eigenvalue grouping.
"""
import numpy as np
import pytest

from eigenspace.degeneracy import (
    group_by_eigenvalue,
    group_roots,
    is_whole_space_invariant,
    nullity,
)
from eigenspace.types import EigenPair

EX = np.array([1.0, 0.0, 0.0])
EY = np.array([0.0, 1.0, 0.0])
EZ = np.array([0.0, 0.0, 1.0])


class TestWholeSpace:

    @pytest.mark.parametrize("m", [
        np.eye(2), np.eye(3), 2.0 * np.eye(2), -3.5 * np.eye(3), np.zeros((3, 3)),
    ])
    def test_scalar_multiples(self, m):
        assert is_whole_space_invariant(m)

    def test_within_tolerance(self):
        m = np.eye(3) + 1e-8 * np.ones((3, 3))
        assert is_whole_space_invariant(m)

    @pytest.mark.parametrize("m", [
        np.diag([1.0, 2.0]),
        np.array([[1.0, 0.5], [0.0, 1.0]]),
        np.diag([2.0, 2.0, 3.0]),
        np.array([[1.0, 0.0, 0.0], [0.0, 1.0, 0.0], [1e-3, 0.0, 1.0]]),
    ])
    def test_not_scalar(self, m):
        assert not is_whole_space_invariant(m)


class TestGroupRoots:

    def test_distinct(self):
        assert group_roots([1.0, 2.0, 3.0]) == ((1.0, 1), (2.0, 1), (3.0, 1))

    def test_repeated_within_tolerance(self):
        ((two, n2), (three, n3)) = group_roots([2.0, 3.0, 2.0 + 1e-9])
        assert (n2, n3) == (2, 1)
        assert two == pytest.approx(2.0, abs=1e-9)
        assert three == 3.0

    def test_value_is_group_mean(self):
        ((value, count),) = group_roots([200.0 + 6e-6, 200.0 - 6e-6])
        assert count == 2
        assert value == pytest.approx(200.0, abs=1e-12)

    def test_tolerance_grows_with_magnitude(self):
        assert len(group_roots([200.0 + 6e-6, 199.999994, 300.0])) == 2
        assert len(group_roots([2.0 + 6e-6, 2.0 - 6e-6])) == 2

    def test_tolerance_grows_with_matrix_scale(self):
        # double eigenvalue 0 of a large matrix
        assert len(group_roots([2e-5, -2e-5, 400.0])) == 3
        assert len(group_roots([2e-5, -2e-5, 400.0], scale=400.0)) == 2

    def test_outside_tolerance(self):
        assert len(group_roots([2.0, 2.0 + 1e-4])) == 2

    def test_empty(self):
        assert group_roots([]) == ()


class TestGroupByEigenvalue:

    def test_groups_in_first_seen_order(self):
        pairs = [EigenPair(2.0, EX), EigenPair(3.0, EZ), EigenPair(2.0, EY)]
        groups = group_by_eigenvalue(pairs)
        assert [g.eigenvalue for g in groups] == [2.0, 3.0]
        assert [g.geometric_multiplicity for g in groups] == [2, 1]

    def test_duplicate_vector_dropped(self):
        pairs = [EigenPair(1.0, EX), EigenPair(1.0, -EX)]
        (group,) = group_by_eigenvalue(pairs)
        assert group.geometric_multiplicity == 1

    def test_algebraic_multiplicity_table(self):
        pairs = [EigenPair(1.0, EX), EigenPair(4.0, EZ)]
        groups = group_by_eigenvalue(pairs, ((1.0, 2), (4.0, 1)))
        assert groups[0].algebraic_multiplicity == 2
        assert groups[0].is_defective
        assert not groups[1].is_defective

    def test_pairs_roundtrip(self):
        (group,) = group_by_eigenvalue([EigenPair(5.0, EX), EigenPair(5.0, EY)])
        assert [p.eigenvalue for p in group.pairs()] == [5.0, 5.0]


class TestNullity:

    def test_distinct_eigenvalue(self):
        assert nullity(np.diag([1.0, 2.0, 3.0]), 2.0) == 1

    def test_plane_eigenspace(self):
        assert nullity(np.diag([2.0, 2.0, 3.0]), 2.0) == 2

    def test_defective(self):
        m = np.array([[1.0, 0.5], [0.0, 1.0]])
        assert nullity(m, 1.0) == 1

    def test_at_least_one(self):
        assert nullity(np.diag([1.0, 2.0]), 10.0) == 1

    def test_near_scalar_shear_is_defective(self):
        # off-diagonal above the whole-space gate, so not a scalar matrix
        m = np.array([[1.0, 5e-5], [0.0, 1.0]])
        assert nullity(m, 1.0) == 1

    @pytest.mark.parametrize("scale", [1.0, 100.0, 1000.0])
    def test_plane_eigenspace_at_scale(self, scale):
        m = scale * np.diag([2.0, 2.0, 3.0])
        assert nullity(m, 2.0 * scale) == 2
