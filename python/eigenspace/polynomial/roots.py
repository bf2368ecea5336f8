"""
Closed-Form Root Finding

Quadratic formula for 2x2 spectra, depressed cubic (trigonometric / Cardano)
for 3x3 spectra. Roots are returned with multiplicity as (real, imag) pairs.
"""

import logging
import math

import numpy as np
from typing import Tuple

from eigenspace.config import EIGENSPACE_CONFIG as cfg
from eigenspace.polynomial.characteristic import characteristic_coefficients
from eigenspace.types import Root

logger = logging.getLogger(__name__)


def solve_quadratic(b: float, c: float) -> Tuple[Root, Root]:
    """
    Roots of λ² + bλ + c = 0.

    Args:
        b: Linear coefficient (-trace for a characteristic polynomial)
        c: Constant coefficient (determinant)

    Returns:
        Two roots, larger real root first. A negative discriminant (beyond
        epsilon relative to b² and |4c|) yields a complex-conjugate pair.
    """
    eps = cfg.polynomial.epsilon
    discriminant = b * b - 4.0 * c

    if discriminant < -eps * (b * b + 4.0 * abs(c)):
        half_imag = math.sqrt(-discriminant) / 2.0
        return Root(-b / 2.0, half_imag), Root(-b / 2.0, -half_imag)

    # Clamp tiny negative values from rounding
    sqrt_disc = math.sqrt(max(0.0, discriminant))
    return Root((-b + sqrt_disc) / 2.0), Root((-b - sqrt_disc) / 2.0)


def solve_cubic(a: float, b: float, c: float, d: float) -> Tuple[Root, Root, Root]:
    """
    Roots of a·t³ + b·t² + c·t + d = 0.

    The cubic is normalised, then depressed via t = x - b/3 into
    x³ + p·x + q = 0 with discriminant Δ = -(4p³ + 27q²).

    Args:
        a: Leading coefficient (nonzero)
        b, c, d: Remaining coefficients

    Returns:
        Three roots with multiplicity.
        Δ >= -ε·(4|p|³ + 27q²): three real roots (triple root when p ≈ 0,
                                else trigonometric)
        otherwise:              one real root followed by a complex pair

        Both tolerances are relative, so a double root at any scale stays
        real instead of drifting to a pair with a tiny imaginary part.

    Raises:
        ValueError: If a is zero
    """
    if a == 0:
        raise ValueError("Leading coefficient must be nonzero")

    eps = cfg.polynomial.epsilon
    b, c, d = b / a, c / a, d / a
    shift = b / 3.0

    p = c - b * b / 3.0
    q = 2.0 * b ** 3 / 27.0 - b * c / 3.0 + d
    discriminant = -(4.0 * p ** 3 + 27.0 * q * q)
    p_tol = eps * b * b

    if discriminant >= -eps * (4.0 * abs(p) ** 3 + 27.0 * q * q) and p <= p_tol:
        if abs(p) <= p_tol:
            root = float(np.cbrt(-q)) - shift
            return Root(root), Root(root), Root(root)

        r = math.sqrt(-p / 3.0)
        arg = -q / (2.0 * r ** 3)
        theta = math.acos(min(1.0, max(-1.0, arg))) / 3.0
        return tuple(
            Root(2.0 * r * math.cos(theta - 2.0 * math.pi * k / 3.0) - shift)
            for k in range(3)
        )

    # One real root, two complex conjugates (also p > 0, where acos is undefined)
    sqrt_term = math.sqrt(max(0.0, -discriminant / 108.0))
    big_a = float(np.cbrt(-q / 2.0 + sqrt_term))
    big_b = float(np.cbrt(-q / 2.0 - sqrt_term))

    real_part = -(big_a + big_b) / 2.0 - shift
    imag_part = abs(big_a - big_b) * math.sqrt(3.0) / 2.0
    return (
        Root(big_a + big_b - shift),
        Root(real_part, imag_part),
        Root(real_part, -imag_part),
    )


def characteristic_roots(matrix: np.ndarray) -> Tuple[Root, ...]:
    """
    Eigenvalues of a 2x2 or 3x3 matrix as characteristic-polynomial roots.

    Args:
        matrix: float64 array of shape (2, 2) or (3, 3)

    Returns:
        Exactly n roots, with multiplicity
    """
    coeffs = characteristic_coefficients(matrix)

    if matrix.shape[0] == 2:
        roots = solve_quadratic(coeffs[1], coeffs[2])
    else:
        roots = solve_cubic(*coeffs)

    if not all(r.is_real for r in roots):
        logger.debug(f"Complex spectrum for {matrix.shape[0]}x{matrix.shape[0]} matrix: {roots}")

    return roots


def real_eigenvalues(roots: Tuple[Root, ...]) -> Tuple[float, ...]:
    """Real parts of the real roots, complex roots dropped."""
    return tuple(float(r.real) for r in roots if r.is_real)
