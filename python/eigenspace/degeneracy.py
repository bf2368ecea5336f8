"""
Degeneracy Classification

Whole-space detection, eigenvalue grouping and eigenspace dimension.
"""

import numpy as np
from scipy.linalg import svdvals
from typing import Iterable, List, Sequence, Tuple

from eigenspace.config import EIGENSPACE_CONFIG as cfg
from eigenspace.linalg import is_independent, shifted
from eigenspace.types import EigenGroup, EigenPair


def is_whole_space_invariant(matrix: np.ndarray) -> bool:
    """
    True if the matrix is a scalar multiple of the identity.

    All off-diagonal entries within tolerance of zero and all diagonal
    entries within tolerance of each other. Every subspace is then
    invariant and nothing specific should be drawn.
    """
    tol = cfg.degeneracy.identity_tolerance
    diag = np.diag(matrix)
    off_diag = matrix - np.diag(diag)

    if np.any(np.abs(off_diag) >= tol):
        return False
    return bool(np.all(np.abs(diag - diag[0]) < tol))


def same_eigenvalue(a: float, b: float, scale: float = 1.0) -> bool:
    """Tolerance-equal eigenvalues; the tolerance grows with |λ| and the matrix norm."""
    tol = cfg.degeneracy.grouping_tolerance * max(1.0, abs(a), abs(b), scale)
    return abs(a - b) < tol


def group_roots(
    eigenvalues: Iterable[float],
    scale: float = 1.0
) -> Tuple[Tuple[float, int], ...]:
    """
    Merge tolerance-equal eigenvalues.

    Args:
        eigenvalues: Real eigenvalues with multiplicity
        scale: Matrix norm; widens the tolerance for large matrices

    Returns:
        (value, algebraic_multiplicity) per distinct eigenvalue, in
        first-seen order. The value is the mean of its group: a double root
        from the cubic formula splits symmetrically about the true value.
    """
    groups: List[List[float]] = []
    for lam in eigenvalues:
        for members in groups:
            if same_eigenvalue(lam, members[0], scale):
                members.append(float(lam))
                break
        else:
            groups.append([float(lam)])
    return tuple((float(np.mean(members)), len(members)) for members in groups)


def group_by_eigenvalue(
    pairs: Sequence[EigenPair],
    multiplicities: Sequence[Tuple[float, int]] = (),
    scale: float = 1.0
) -> Tuple[EigenGroup, ...]:
    """
    Collect eigen-pairs into one EigenGroup per eigenvalue.

    Args:
        pairs: (eigenvalue, unit vector) pairs
        multiplicities: Optional (value, algebraic_multiplicity) table from
                        group_roots; defaults to the number of pairs seen
        scale: Matrix norm, as for group_roots

    Returns:
        Groups in first-seen order. A vector parallel to one already in its
        group is dropped, so the group size is the recovered eigenspace
        dimension.
    """
    values: List[float] = []
    vectors: List[List[np.ndarray]] = []

    for lam, v in pairs:
        for i, value in enumerate(values):
            if same_eigenvalue(lam, value, scale):
                if is_independent(v, vectors[i]):
                    vectors[i].append(v)
                break
        else:
            values.append(float(lam))
            vectors.append([v])

    groups = []
    for value, vecs in zip(values, vectors):
        algebraic = len(vecs)
        for known, count in multiplicities:
            if same_eigenvalue(value, known, scale):
                algebraic = max(count, len(vecs))
                break
        groups.append(EigenGroup(value, tuple(vecs), algebraic))
    return tuple(groups)


def nullity(matrix: np.ndarray, eigenvalue: float) -> int:
    """
    Numerical dimension of the nullspace of A - λI.

    Counts singular values below the rank tolerance, taken relative to the
    largest singular value of A (never below the absolute tolerance, which
    matches the whole-space gate). A real eigenvalue always has at least
    one eigenvector, so the result is at least 1.
    """
    tol = cfg.degeneracy.rank_tolerance * max(1.0, svdvals(matrix)[0])
    sv = svdvals(shifted(matrix, eigenvalue))
    return max(1, int(np.sum(sv < tol)))
