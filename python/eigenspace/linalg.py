"""
Small Vector and Matrix Helpers

Input coercion, normalisation and the residual / independence checks that
every eigenvector candidate has to pass.
"""

import numpy as np
from typing import Optional, Sequence

from eigenspace.config import EIGENSPACE_CONFIG as cfg


def coerce_matrix(matrix) -> np.ndarray:
    """
    Convert input to a float64 2x2 or 3x3 array.

    Args:
        matrix: Square array-like of shape (2, 2) or (3, 3), or a flat
                sequence of 4 or 9 coefficients in row-major order

    Returns:
        New float64 array of shape (n, n), n in {2, 3}

    Raises:
        ValueError: If the input does not describe a 2x2 or 3x3 matrix
    """
    arr = np.array(matrix, dtype=np.float64)

    if arr.ndim == 1 and arr.size in (4, 9):
        n = 2 if arr.size == 4 else 3
        arr = arr.reshape(n, n)

    if arr.ndim != 2 or arr.shape[0] != arr.shape[1]:
        raise ValueError("Matrix must be square")
    if arr.shape[0] not in (2, 3):
        raise ValueError(f"Only 2x2 and 3x3 matrices are supported, got {arr.shape}")

    return arr


def shifted(matrix: np.ndarray, eigenvalue: float) -> np.ndarray:
    """Return A - λI."""
    return matrix - eigenvalue * np.eye(matrix.shape[0])


def unit(v: np.ndarray, eps: float = 0.0) -> Optional[np.ndarray]:
    """
    Normalise v to a read-only unit vector.

    Returns None when the squared norm is not above eps.
    """
    v = np.asarray(v, dtype=np.float64)
    norm_sq = float(np.dot(v, v))
    if norm_sq <= eps or not np.isfinite(norm_sq):
        return None
    out = v / np.sqrt(norm_sq)
    out.setflags(write=False)
    return out


def residual(shifted_matrix: np.ndarray, v: np.ndarray) -> float:
    """||(A - λI) v||."""
    return float(np.linalg.norm(shifted_matrix @ v))


def is_parallel(u: np.ndarray, v: np.ndarray) -> bool:
    """True if two unit vectors point along the same line."""
    return abs(float(np.dot(u, v))) > cfg.eigenvector.parallel_threshold


def is_independent(v: np.ndarray, found: Sequence[np.ndarray]) -> bool:
    """True if unit v is not parallel to any vector in found."""
    return all(not is_parallel(v, f) for f in found)


def accept(
    shifted_matrix: np.ndarray,
    v: Optional[np.ndarray],
    found: Sequence[np.ndarray] = ()
) -> Optional[np.ndarray]:
    """
    Validate an eigenvector candidate.

    Args:
        shifted_matrix: A - λI
        v: Candidate (any length, or None)
        found: Unit vectors already recovered for the same eigenvalue

    Returns:
        Unit candidate if it lies in the nullspace and is independent of
        found, else None
    """
    if v is None:
        return None
    v = unit(v)
    if v is None:
        return None
    if residual(shifted_matrix, v) >= cfg.eigenvector.residual_tolerance:
        return None
    if not is_independent(v, found):
        return None
    return v


def perpendicular(v: np.ndarray) -> np.ndarray:
    """
    Unit vector perpendicular to a unit 3-vector.

    Crosses with the x-axis unless v is nearly aligned with it,
    in which case the y-axis is used.
    """
    helper = np.array([1.0, 0.0, 0.0])
    if abs(v[0]) >= cfg.eigenvector.axis_threshold:
        helper = np.array([0.0, 1.0, 0.0])
    return unit(np.cross(helper, v))
