"""Segment displacement utilities using only numpy."""

import numpy as np
from numpy.typing import NDArray


def spherical_displacement(r: float, pitch: float, yaw: float) -> NDArray[np.float64]:
    """(3,) displacement of a segment of length r.

    Pitch is measured from the vertical (Z) axis, yaw in the horizontal plane
    from the X axis::

        dx = r * cos(yaw) * sin(pitch)
        dy = r * sin(yaw) * sin(pitch)
        dz = r * cos(pitch)
    """
    sin_p = np.sin(pitch)
    return np.array([
        r * np.cos(yaw) * sin_p,
        r * np.sin(yaw) * sin_p,
        r * np.cos(pitch),
    ])


def stack_displacements(
    segments: list[tuple[float, float, float]],
) -> NDArray[np.float64]:
    """(n, 3) displacements for a list of (r, pitch, yaw) segments."""
    if not segments:
        return np.zeros((0, 3))
    return np.vstack([spherical_displacement(r, p, y) for r, p, y in segments])

