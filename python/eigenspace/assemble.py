"""
Invariant Space Assembly

Matrix -> real eigenvalues -> independent eigenvectors per eigenvalue ->
invariant lines and planes.

Every entry point is total on finite 2x2 / 3x3 input: degenerate spectra
give fewer (or zero) objects, never an exception.
"""

import logging

import numpy as np
from typing import List, Tuple

from eigenspace.degeneracy import (
    group_by_eigenvalue,
    group_roots,
    is_whole_space_invariant,
    nullity,
)
from eigenspace.linalg import coerce_matrix
from eigenspace.polynomial.roots import characteristic_roots, real_eigenvalues
from eigenspace.solvers.eigenvector import eigenvector
from eigenspace.types import EigenGroup, EigenPair, InvariantObject, Line, Plane

logger = logging.getLogger(__name__)


def _prepare(matrix):
    """Coerce input; None when there is nothing to solve."""
    m = coerce_matrix(matrix)

    if not np.all(np.isfinite(m)):
        logger.warning("Non-finite matrix coefficients, no invariant spaces computed")
        return None

    if is_whole_space_invariant(m):
        logger.debug("Scalar multiple of identity: whole space invariant")
        return None

    return m


def _scale(m: np.ndarray) -> float:
    return float(np.linalg.norm(m))


def _solve_pairs(m: np.ndarray) -> Tuple[Tuple[EigenPair, ...], Tuple[Tuple[float, int], ...]]:
    n = m.shape[0]
    distinct = group_roots(real_eigenvalues(characteristic_roots(m)), _scale(m))

    pairs: List[EigenPair] = []
    for lam, multiplicity in distinct:
        budget = min(multiplicity, nullity(m, lam))
        found: Tuple[np.ndarray, ...] = ()

        while len(found) < budget and len(pairs) < n:
            v = eigenvector(m, lam, found)
            if v is None:
                break
            found = found + (v,)
            pairs.append(EigenPair(lam, v))

        if not found:
            logger.debug(f"λ={lam:.6g}: no eigenvector recovered, skipped")

    return tuple(pairs), distinct


def eigen_pairs(matrix) -> Tuple[EigenPair, ...]:
    """
    Real eigenvalues with a maximal set of independent unit eigenvectors.

    Args:
        matrix: 2x2 or 3x3 array-like, or 4 / 9 row-major coefficients

    Returns:
        EigenPairs; several pairs share an eigenvalue when its eigenspace
        has dimension > 1. Empty for complex spectra, whole-space matrices
        and non-finite input.

    Raises:
        ValueError: If the input is not a 2x2 or 3x3 matrix
    """
    m = _prepare(matrix)
    if m is None:
        return ()
    return _solve_pairs(m)[0]


def eigen_groups(matrix) -> Tuple[EigenGroup, ...]:
    """
    Eigen-pairs grouped by eigenvalue, with algebraic multiplicities.

    The geometric multiplicity of each group is the number of independent
    eigenvectors actually recovered.
    """
    m = _prepare(matrix)
    if m is None:
        return ()
    pairs, distinct = _solve_pairs(m)
    return group_by_eigenvalue(pairs, distinct, _scale(m))


def invariant_spaces(matrix) -> Tuple[InvariantObject, ...]:
    """
    Lines and planes through the origin left invariant by the matrix.

    One Line per eigenvalue with a 1-D eigenspace, one Plane per eigenvalue
    with a 2-D eigenspace of a 3x3 matrix. Whole-space eigenspaces produce
    nothing.

    Args:
        matrix: 2x2 or 3x3 array-like, or 4 / 9 row-major coefficients

    Returns:
        Tuple of Line / Plane records with unit direction / normal

    Examples:
        >>> [o.kind for o in invariant_spaces([[1, 0.5], [0, 1]])]
        ['line']
    """
    m = _prepare(matrix)
    if m is None:
        return ()

    pairs, distinct = _solve_pairs(m)
    n = m.shape[0]

    objects: List[InvariantObject] = []
    for group in group_by_eigenvalue(pairs, distinct, _scale(m)):
        dim = group.geometric_multiplicity
        if dim == 1:
            objects.append(Line(group.vectors[0], group.eigenvalue))
        elif dim == 2 and n == 3:
            objects.append(Plane.from_basis(group.vectors[0], group.vectors[1], group.eigenvalue))

    return tuple(objects)


assemble = invariant_spaces
