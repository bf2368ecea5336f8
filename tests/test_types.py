"""
Unit tests for result types and vector helpers.
"""
import numpy as np
import pytest

from eigenspace.linalg import accept, coerce_matrix, is_independent, perpendicular, unit
from eigenspace.types import EigenGroup, Line, Plane, Root


class TestRoot:

    def test_real_default(self):
        assert Root(2.0).is_real
        assert Root(2.0) == (2.0, 0.0)

    def test_imag_tolerance(self):
        assert Root(1.0, 1e-12).is_real
        assert not Root(1.0, 1e-6).is_real


class TestPlane:

    def test_from_basis_normal(self):
        p = Plane.from_basis(np.array([1.0, 0.0, 0.0]), np.array([0.0, 1.0, 0.0]), 2.0)
        np.testing.assert_allclose(p.normal, [0.0, 0.0, 1.0])
        assert p.kind == "plane"
        assert p.vector is p.normal

    def test_from_basis_normalises(self):
        p = Plane.from_basis(np.array([3.0, 0.0, 0.0]), np.array([1.0, 1.0, 0.0]), 1.0)
        assert abs(np.linalg.norm(p.normal) - 1.0) < 1e-12
        for b in p.basis:
            assert abs(np.linalg.norm(b) - 1.0) < 1e-12

    def test_parallel_basis_rejected(self):
        with pytest.raises(ValueError):
            Plane.from_basis(np.array([1.0, 0.0, 0.0]), np.array([-2.0, 0.0, 0.0]), 1.0)

    def test_2d_basis_rejected(self):
        with pytest.raises(ValueError):
            Plane.from_basis(np.array([1.0, 0.0]), np.array([0.0, 1.0]), 1.0)


class TestLine:

    def test_to_dict(self):
        line = Line(unit(np.array([0.0, 2.0])), 3.0)
        assert line.to_dict() == {"kind": "line", "vector": [0.0, 1.0], "eigenvalue": 3.0}

    def test_kind_not_settable(self):
        with pytest.raises(TypeError):
            Line(np.array([1.0, 0.0]), 1.0, kind="plane")


class TestEigenGroup:

    def test_multiplicities(self):
        g = EigenGroup(1.0, (np.array([1.0, 0.0]),), algebraic_multiplicity=2)
        assert g.geometric_multiplicity == 1
        assert g.is_defective


class TestHelpers:

    def test_coerce_flat(self):
        m = coerce_matrix([1, 2, 3, 4])
        np.testing.assert_array_equal(m, [[1.0, 2.0], [3.0, 4.0]])
        assert m.dtype == np.float64

    def test_coerce_copies(self):
        src = np.eye(3)
        m = coerce_matrix(src)
        m[0, 0] = 9.0
        assert src[0, 0] == 1.0

    @pytest.mark.parametrize("bad", [np.eye(1), np.eye(4), np.ones((2, 3)), [1.0] * 5])
    def test_coerce_rejects(self, bad):
        with pytest.raises(ValueError):
            coerce_matrix(bad)

    def test_unit_zero_is_none(self):
        assert unit(np.zeros(3)) is None

    def test_perpendicular(self):
        for v in (np.array([1.0, 0.0, 0.0]), unit(np.array([1.0, 2.0, 3.0]))):
            p = perpendicular(v)
            assert abs(np.dot(p, v)) < 1e-12
            assert abs(np.linalg.norm(p) - 1.0) < 1e-12

    def test_is_independent(self):
        ex = np.array([1.0, 0.0])
        assert is_independent(np.array([0.0, 1.0]), (ex,))
        assert not is_independent(-ex, (ex,))
        assert is_independent(ex, ())

    def test_accept_rejects_large_residual(self):
        M = np.diag([1.0, 0.0])
        assert accept(M, np.array([1.0, 0.0])) is None
        np.testing.assert_allclose(accept(M, np.array([0.0, 5.0])), [0.0, 1.0])
