"""
Preset Transformations

The standard example matrices offered next to the matrix editor:
identity, 45° rotation, uniform scale, shear and reflection, in 2D and 3D.
"""

import numpy as np

PRESETS = ("identity", "rotation", "scale", "shear", "reflection")


def rotation(angle: float, dimension: int = 2) -> np.ndarray:
    """Counter-clockwise rotation by angle (radians); about z in 3D."""
    c, s = np.cos(angle), np.sin(angle)
    m = np.eye(dimension)
    m[:2, :2] = [[c, -s], [s, c]]
    return m


def preset(name: str, dimension: int = 2) -> np.ndarray:
    """
    Matrix for a named preset.

    Args:
        name: One of PRESETS
        dimension: 2 or 3

    Returns:
        New float64 array of shape (dimension, dimension)

    Raises:
        ValueError: If name or dimension is unknown
    """
    if dimension not in (2, 3):
        raise ValueError(f"dimension must be 2 or 3, got {dimension}")

    if name == "rotation":
        return rotation(np.pi / 4, dimension)

    m = np.eye(dimension)
    if name == "identity":
        pass
    elif name == "scale":
        m *= 2.0
    elif name == "shear":
        m[0, 1] = 0.5
    elif name == "reflection":
        m[0, 0] = -1.0
    else:
        raise ValueError(f"Unknown preset '{name}', expected one of {PRESETS}")
    return m
