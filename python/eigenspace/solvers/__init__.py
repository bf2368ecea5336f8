"""Eigenvector solvers: 2x2 closed form, 3x3 nullspace strategies."""

from eigenspace.solvers.eigenvector import eigenvector, eigenvector_2x2, eigenvector_3x3
from eigenspace.solvers.strategies import STRATEGIES_3X3

__all__ = [
    "eigenvector",
    "eigenvector_2x2",
    "eigenvector_3x3",
    "STRATEGIES_3X3",
]
