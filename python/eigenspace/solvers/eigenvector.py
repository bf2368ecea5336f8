"""
Eigenvector Solver

Finds one unit eigenvector for a known real eigenvalue, independent of the
vectors already recovered for that eigenvalue. Closed form for 2x2, ordered
nullspace strategies for 3x3.
"""

import logging

import numpy as np
from typing import Optional, Sequence, Tuple

from eigenspace.config import EIGENSPACE_CONFIG as cfg
from eigenspace.linalg import accept, shifted
from eigenspace.solvers.strategies import STRATEGIES_3X3, Strategy

logger = logging.getLogger(__name__)


def _candidates_2x2(M: np.ndarray, found: Tuple[np.ndarray, ...]):
    """Closed-form candidates for (A - λI) v = 0, most stable first."""
    eps = cfg.eigenvector.zero_epsilon
    a_l, b = M[0]
    c, d_l = M[1]

    # First row: (a-λ)x + b·y = 0  ->  (b, -(a-λ))
    if abs(b) > eps:
        yield np.array([b, -a_l])
    # Second row: c·x + (d-λ)y = 0  ->  (-(d-λ), c)
    if abs(c) > eps:
        yield np.array([-d_l, c])

    # Diagonal M
    if abs(a_l) > eps:
        yield np.array([0.0, 1.0])
    elif abs(d_l) > eps:
        yield np.array([1.0, 0.0])
    elif found:
        # M ≈ 0: any vector; take the perpendicular of the one found
        yield np.array([-found[0][1], found[0][0]])
    else:
        yield np.array([1.0, 0.0])


def eigenvector_2x2(
    matrix: np.ndarray,
    eigenvalue: float,
    found: Sequence[np.ndarray] = ()
) -> Optional[np.ndarray]:
    """
    Unit eigenvector of a 2x2 matrix.

    Args:
        matrix: 2x2 float64 array
        eigenvalue: Real eigenvalue λ
        found: Unit eigenvectors already recovered for λ

    Returns:
        Unit vector v with ||(A - λI) v|| < tolerance, not parallel to any
        vector in found; None if no such vector exists
    """
    found = tuple(found)
    if len(found) >= 2:
        return None

    M = shifted(matrix, eigenvalue)
    for candidate in _candidates_2x2(M, found):
        v = accept(M, candidate, found)
        if v is not None:
            return v
    return None


def eigenvector_3x3(
    matrix: np.ndarray,
    eigenvalue: float,
    found: Sequence[np.ndarray] = (),
    strategies: Sequence[Strategy] = STRATEGIES_3X3
) -> Optional[np.ndarray]:
    """
    Unit eigenvector of a 3x3 matrix from the nullspace of A - λI.

    Args:
        matrix: 3x3 float64 array
        eigenvalue: Real eigenvalue λ
        found: Unit eigenvectors already recovered for λ
        strategies: Ordered nullspace strategies; the first non-None wins

    Returns:
        Validated unit eigenvector, or None if every strategy fails
    """
    found = tuple(found)
    if len(found) >= 3:
        return None

    M = shifted(matrix, eigenvalue)
    for strategy in strategies:
        v = strategy(M, found)
        if v is not None:
            logger.debug(f"λ={eigenvalue:.6g}: eigenvector from {strategy.__name__}")
            return v

    logger.debug(f"λ={eigenvalue:.6g}: no eigenvector independent of {len(found)} found")
    return None


def eigenvector(
    matrix: np.ndarray,
    eigenvalue: float,
    found: Sequence[np.ndarray] = ()
) -> Optional[np.ndarray]:
    """
    Unit eigenvector of a 2x2 or 3x3 matrix for a real eigenvalue.

    Dispatches on matrix size. See eigenvector_2x2 / eigenvector_3x3.

    A matrix whose largest entry is below 1 is first rescaled to unit size
    (eigenvectors are unchanged), so the absolute row and residual
    thresholds still separate directions. The residual against the
    original matrix is then smaller than the one that was accepted.
    """
    size = float(np.max(np.abs(matrix)))
    if 0.0 < size < 1.0:
        matrix = matrix / size
        eigenvalue = eigenvalue / size

    if matrix.shape[0] == 2:
        return eigenvector_2x2(matrix, eigenvalue, found)
    return eigenvector_3x3(matrix, eigenvalue, found)
