"""
Characteristic Polynomial Coefficients

det(λI - A) for 2x2 and 3x3 matrices, in monic form.
"""

import numpy as np
from typing import Tuple


def trace(matrix: np.ndarray) -> float:
    return float(np.trace(matrix))


def principal_minor_sum(matrix: np.ndarray) -> float:
    """
    Sum of the principal 2x2 minors.

    For a 2x2 matrix this is its determinant.
    """
    m = matrix
    if m.shape[0] == 2:
        return float(m[0, 0] * m[1, 1] - m[0, 1] * m[1, 0])
    return float(
        m[0, 0] * m[1, 1] - m[0, 1] * m[1, 0]
        + m[0, 0] * m[2, 2] - m[0, 2] * m[2, 0]
        + m[1, 1] * m[2, 2] - m[1, 2] * m[2, 1]
    )


def determinant(matrix: np.ndarray) -> float:
    """Determinant by cofactor expansion (exact for the closed form)."""
    m = matrix
    if m.shape[0] == 2:
        return float(m[0, 0] * m[1, 1] - m[0, 1] * m[1, 0])
    return float(
        m[0, 0] * m[1, 1] * m[2, 2]
        + m[0, 1] * m[1, 2] * m[2, 0]
        + m[0, 2] * m[1, 0] * m[2, 1]
        - m[0, 2] * m[1, 1] * m[2, 0]
        - m[0, 1] * m[1, 0] * m[2, 2]
        - m[0, 0] * m[1, 2] * m[2, 1]
    )


def characteristic_coefficients(matrix: np.ndarray) -> Tuple[float, ...]:
    """
    Coefficients of the monic characteristic polynomial, highest degree first.

    Args:
        matrix: 2x2 or 3x3 array

    Returns:
        2x2: (1, -tr, det)            for λ² - tr·λ + det
        3x3: (1, -tr, M2, -det)       for λ³ - tr·λ² + M2·λ - det
        where M2 is the sum of principal 2x2 minors
    """
    tr = trace(matrix)
    det = determinant(matrix)

    if matrix.shape[0] == 2:
        return (1.0, -tr, det)

    return (1.0, -tr, principal_minor_sum(matrix), -det)
