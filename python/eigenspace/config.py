"""
Eigenspace Configuration

Centralized tolerances for the characteristic-polynomial solver, the
eigenvector solver and the degeneracy classifier.
Avoids hardcoded magic numbers scattered across modules.

Usage:
    from eigenspace.config import EIGENSPACE_CONFIG as cfg

    # Access values
    if discriminant < -cfg.polynomial.epsilon * scale:
        return complex_pair
    if np.linalg.norm(residual) < cfg.eigenvector.residual_tolerance:
        return v
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class PolynomialConfig:
    """Configuration for closed-form root finding."""

    # Discriminant / depressed-cubic tolerance, relative to the size of
    # the terms being compared
    epsilon: float = 1e-10

    # Roots with |imag| above this are complex
    imag_tolerance: float = 1e-10


@dataclass(frozen=True)
class EigenvectorConfig:
    """Configuration for nullspace extraction of (A - λI)."""

    # Off-diagonal / diagonal "is zero" test (2x2 closed form)
    zero_epsilon: float = 1e-10

    # Squared row norm below which a row of (A - λI) counts as zero (3x3)
    row_epsilon: float = 1e-8

    # Accept v only if ||(A - λI) v|| is below this
    residual_tolerance: float = 0.01

    # |dot| above this means two unit vectors are parallel
    parallel_threshold: float = 0.99

    # Pick x-axis as helper unless the reference vector is this close to it
    axis_threshold: float = 0.9

    # Minimum |det| of a 2x2 minor used by direct elimination
    minor_epsilon: float = 1e-8


@dataclass(frozen=True)
class DegeneracyConfig:
    """Configuration for whole-space detection and eigenvalue grouping."""

    # Scalar-multiple-of-identity check
    identity_tolerance: float = 1e-6

    # |λi - λj| below this times max(1, |λ|, ||A||) puts both in one group
    grouping_tolerance: float = 1e-6

    # Singular values of (A - λI) below this times max(1, σmax(A)) count
    # toward the nullity
    rank_tolerance: float = 1e-6


@dataclass(frozen=True)
class EigenspaceConfig:
    """Master configuration for the engine."""

    polynomial: PolynomialConfig = PolynomialConfig()
    eigenvector: EigenvectorConfig = EigenvectorConfig()
    degeneracy: DegeneracyConfig = DegeneracyConfig()


# Global singleton instance
EIGENSPACE_CONFIG = EigenspaceConfig()
