"""
Shared test matrices with known spectra.

Every matrix here has a provable eigenstructure that numpy.linalg and
scipy.linalg agree on. No ambiguous cases.
"""
import numpy as np
import pytest


@pytest.fixture
def symmetric_3x3():
    """Random symmetric matrices: three real, almost surely distinct eigenvalues."""
    rng = np.random.RandomState(42)
    out = []
    for _ in range(100):
        a = rng.randn(3, 3)
        out.append(a + a.T)
    return out


@pytest.fixture
def general_3x3():
    """Random non-symmetric matrices: one or three real eigenvalues."""
    rng = np.random.RandomState(42)
    return [rng.uniform(-3, 3, size=(3, 3)) for _ in range(200)]


@pytest.fixture
def general_2x2():
    """Random 2x2 matrices: real or complex-conjugate spectra."""
    rng = np.random.RandomState(42)
    return [rng.uniform(-3, 3, size=(2, 2)) for _ in range(200)]


@pytest.fixture
def plane_eigenspaces():
    """Q diag(a, a, b) Q^T: a 2-D eigenspace orthogonal to Q[:, 2]."""
    rng = np.random.RandomState(42)
    out = []
    for _ in range(50):
        q, _ = np.linalg.qr(rng.randn(3, 3))
        a, b = rng.choice([-3.0, -2.0, -1.0, 0.5, 1.0, 2.0, 4.0], size=2, replace=False)
        out.append((q @ np.diag([a, a, b]) @ q.T, a, q[:, 2]))
    return out


@pytest.fixture
def defective_3x3():
    """Similarity transforms of Jordan blocks: one eigenvector per eigenvalue."""
    rng = np.random.RandomState(42)
    jordan = np.array([[2.0, 1.0, 0.0], [0.0, 2.0, 0.0], [0.0, 0.0, -1.0]])
    out = []
    for _ in range(20):
        p = np.eye(3) + 0.3 * rng.randn(3, 3)
        out.append((p @ jordan @ np.linalg.inv(p), p))
    return out
