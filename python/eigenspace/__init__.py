"""
eigenspace — closed-form invariant spaces of 2x2 and 3x3 real matrices.

Real eigenvalues from the characteristic polynomial, a maximal set of
independent unit eigenvectors per eigenvalue, and the invariant lines and
planes they span. Pure functions, no state.

Usage:
    from eigenspace import invariant_spaces, eigen_pairs

    for obj in invariant_spaces([[2, 0, 0], [0, 2, 0], [0, 0, 3]]):
        print(obj.kind, obj.vector, obj.eigenvalue)

    # Or import by component:
    from eigenspace.polynomial.roots import solve_cubic
    from eigenspace.solvers.eigenvector import eigenvector_3x3
    from eigenspace.degeneracy import is_whole_space_invariant
"""
__version__ = "0.1.0"

from eigenspace.assemble import (
    assemble,
    eigen_groups,
    eigen_pairs,
    invariant_spaces,
)
from eigenspace.config import EIGENSPACE_CONFIG
from eigenspace.degeneracy import group_by_eigenvalue, is_whole_space_invariant
from eigenspace.polynomial import characteristic_roots, real_eigenvalues
from eigenspace.presets import PRESETS, preset
from eigenspace.solvers import eigenvector
from eigenspace.types import EigenGroup, EigenPair, Line, Plane, Root

# Subpackages
from eigenspace import polynomial  # noqa: F401
from eigenspace import solvers  # noqa: F401

__all__ = [
    # Engine entry points
    "assemble",
    "invariant_spaces",
    "eigen_pairs",
    "eigen_groups",
    # Components
    "characteristic_roots",
    "real_eigenvalues",
    "eigenvector",
    "is_whole_space_invariant",
    "group_by_eigenvalue",
    # Types
    "Root",
    "EigenPair",
    "EigenGroup",
    "Line",
    "Plane",
    # Presets / config
    "preset",
    "PRESETS",
    "EIGENSPACE_CONFIG",
    # Subpackages
    "polynomial",
    "solvers",
]
