"""
Nullspace Strategies for 3x3 (A - λI)

Each strategy takes the shifted matrix M = A - λI and the unit vectors already
recovered for λ, and returns a validated unit eigenvector or None. They are
tried in order by eigenvector_3x3; the first hit wins.
"""

import numpy as np
from itertools import combinations
from typing import Callable, List, Optional, Tuple

from eigenspace.config import EIGENSPACE_CONFIG as cfg
from eigenspace.linalg import accept, is_independent, is_parallel, perpendicular, unit

Strategy = Callable[[np.ndarray, Tuple[np.ndarray, ...]], Optional[np.ndarray]]

_AXES = (
    np.array([1.0, 0.0, 0.0]),
    np.array([0.0, 1.0, 0.0]),
    np.array([0.0, 0.0, 1.0]),
)


def nonzero_rows(M: np.ndarray) -> List[np.ndarray]:
    """Rows of M whose squared norm exceeds the row epsilon."""
    return [row for row in M if float(np.dot(row, row)) > cfg.eigenvector.row_epsilon]


def whole_space(M: np.ndarray, found: Tuple[np.ndarray, ...]) -> Optional[np.ndarray]:
    """
    M ≈ 0: every vector is an eigenvector.

    First call returns the x-axis, the second a vector perpendicular to the
    first, the third the cross product of the two already found.
    """
    if nonzero_rows(M):
        return None

    if not found:
        candidate = _AXES[0]
    elif len(found) == 1:
        candidate = perpendicular(found[0])
    elif len(found) == 2:
        candidate = np.cross(found[0], found[1])
    else:
        return None

    return accept(M, candidate, found)


def plane(M: np.ndarray, found: Tuple[np.ndarray, ...]) -> Optional[np.ndarray]:
    """
    Rank-1 M: all nonzero rows are parallel, the eigenspace is the plane
    orthogonal to them.

    The largest row is the plane normal. The first vector is any in-plane
    vector; the second is normal × found[0], with the arbitrary in-plane
    vector as fallback when that cross product degenerates.
    """
    rows = nonzero_rows(M)
    if not rows or len(found) >= 2:
        return None

    units = [unit(row) for row in rows]
    if not all(is_parallel(u, w) for u, w in combinations(units, 2)):
        return None

    normal = units[int(np.argmax([float(np.dot(r, r)) for r in rows]))]

    candidates = []
    if found:
        candidates.append(np.cross(normal, found[0]))
    candidates.append(perpendicular(normal))

    for candidate in candidates:
        v = accept(M, unit(candidate, cfg.eigenvector.row_epsilon), found)
        if v is not None:
            return v
    return None


def row_cross_products(M: np.ndarray, found: Tuple[np.ndarray, ...]) -> Optional[np.ndarray]:
    """
    Rank-2 M: the eigenspace is the line orthogonal to the row space.

    Tries the cross product of every pair of nonzero rows.
    """
    rows = nonzero_rows(M)
    for r1, r2 in combinations(rows, 2):
        v = accept(M, unit(np.cross(r1, r2), cfg.eigenvector.row_epsilon), found)
        if v is not None:
            return v
    return None


def direct_elimination(M: np.ndarray, found: Tuple[np.ndarray, ...]) -> Optional[np.ndarray]:
    """
    Fix one coordinate to 1 and solve the remaining 2x2 system.

    For free coordinate k (z first, then y, then x) and every pair of rows,
    if the 2x2 minor on the other two coordinates is non-singular, solve
    minor @ x = -M[rows, k].
    """
    for k in (2, 1, 0):
        cols = [j for j in range(3) if j != k]
        for i, j in combinations(range(3), 2):
            minor = M[np.ix_([i, j], cols)]
            det = minor[0, 0] * minor[1, 1] - minor[0, 1] * minor[1, 0]
            if abs(det) <= cfg.eigenvector.minor_epsilon:
                continue

            rhs = -M[[i, j], k]
            x0 = (rhs[0] * minor[1, 1] - minor[0, 1] * rhs[1]) / det
            x1 = (minor[0, 0] * rhs[1] - rhs[0] * minor[1, 0]) / det

            v = np.empty(3)
            v[k] = 1.0
            v[cols[0]], v[cols[1]] = x0, x1

            v = accept(M, v, found)
            if v is not None:
                return v
    return None


def canonical_axes(M: np.ndarray, found: Tuple[np.ndarray, ...]) -> Optional[np.ndarray]:
    """Last resort: a standard basis vector that happens to pass validation."""
    for axis in _AXES:
        if is_independent(axis, found):
            v = accept(M, axis, found)
            if v is not None:
                return v
    return None


STRATEGIES_3X3: Tuple[Strategy, ...] = (
    whole_space,
    plane,
    row_cross_products,
    direct_elimination,
    canonical_axes,
)
