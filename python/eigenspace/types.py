"""
Result Types

Tagged records produced by the engine. A root is real or complex, an
invariant object is either a Line or a Plane; a Plane can only be built
from two independent spanning vectors.
"""

from dataclasses import dataclass, field
from typing import Dict, NamedTuple, Tuple, Union

import numpy as np

from eigenspace.config import EIGENSPACE_CONFIG as cfg
from eigenspace.linalg import is_parallel, unit


class Root(NamedTuple):
    """Root of the characteristic polynomial as (real, imag)."""

    real: float
    imag: float = 0.0

    @property
    def is_real(self) -> bool:
        return abs(self.imag) <= cfg.polynomial.imag_tolerance


class EigenPair(NamedTuple):
    """Real eigenvalue with one unit eigenvector."""

    eigenvalue: float
    vector: np.ndarray


@dataclass(frozen=True, eq=False)
class EigenGroup:
    """
    All recovered eigenvectors of one eigenvalue.

    algebraic_multiplicity counts tolerance-equal roots of the characteristic
    polynomial; geometric_multiplicity counts vectors actually recovered.
    """

    eigenvalue: float
    vectors: Tuple[np.ndarray, ...]
    algebraic_multiplicity: int = 1

    @property
    def geometric_multiplicity(self) -> int:
        return len(self.vectors)

    @property
    def is_defective(self) -> bool:
        return self.geometric_multiplicity < self.algebraic_multiplicity

    def pairs(self) -> Tuple[EigenPair, ...]:
        return tuple(EigenPair(self.eigenvalue, v) for v in self.vectors)


@dataclass(frozen=True, eq=False)
class Line:
    """Invariant line through the origin spanned by a unit eigenvector."""

    direction: np.ndarray
    eigenvalue: float
    kind: str = field(default="line", init=False)

    @property
    def vector(self) -> np.ndarray:
        return self.direction

    def to_dict(self) -> Dict[str, object]:
        return {
            "kind": self.kind,
            "vector": [float(x) for x in self.direction],
            "eigenvalue": float(self.eigenvalue),
        }


@dataclass(frozen=True, eq=False)
class Plane:
    """
    Invariant plane through the origin (2-D eigenspace in R^3).

    Use Plane.from_basis; the normal is the normalised cross product of
    the two spanning eigenvectors.
    """

    normal: np.ndarray
    eigenvalue: float
    basis: Tuple[np.ndarray, np.ndarray]
    kind: str = field(default="plane", init=False)

    @classmethod
    def from_basis(cls, v1: np.ndarray, v2: np.ndarray, eigenvalue: float) -> "Plane":
        """
        Build a plane from two spanning eigenvectors.

        Raises:
            ValueError: If the vectors are not 3-D or do not span a plane
        """
        v1 = np.asarray(v1, dtype=np.float64)
        v2 = np.asarray(v2, dtype=np.float64)
        if v1.shape != (3,) or v2.shape != (3,):
            raise ValueError("Invariant planes need two 3-D vectors")

        a, b = unit(v1), unit(v2)
        if a is None or b is None or is_parallel(a, b):
            raise ValueError("Plane basis vectors must be independent")

        normal = unit(np.cross(a, b))
        return cls(normal=normal, eigenvalue=float(eigenvalue), basis=(a, b))

    @property
    def vector(self) -> np.ndarray:
        return self.normal

    def to_dict(self) -> Dict[str, object]:
        return {
            "kind": self.kind,
            "vector": [float(x) for x in self.normal],
            "eigenvalue": float(self.eigenvalue),
        }


InvariantObject = Union[Line, Plane]
