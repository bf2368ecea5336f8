"""Characteristic polynomial coefficients and closed-form roots."""

from eigenspace.polynomial.characteristic import (
    characteristic_coefficients,
    determinant,
    principal_minor_sum,
    trace,
)
from eigenspace.polynomial.roots import (
    characteristic_roots,
    real_eigenvalues,
    solve_cubic,
    solve_quadratic,
)

__all__ = [
    "characteristic_coefficients",
    "determinant",
    "principal_minor_sum",
    "trace",
    "characteristic_roots",
    "real_eigenvalues",
    "solve_cubic",
    "solve_quadratic",
]
