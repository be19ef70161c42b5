"""Absolute link position in the base frame."""

from dataclasses import dataclass

import numpy as np
from numpy.typing import NDArray


@dataclass(frozen=True)
class Position:
    """Cartesian position of a link end point.

    Attributes:
        x: X coordinate in the base frame.
        y: Y coordinate in the base frame.
        z: Z coordinate in the base frame (vertical axis).
    """

    x: float
    y: float
    z: float

    def to_array(self) -> NDArray[np.float64]:
        """Return (3,) numpy array [x, y, z]."""
        return np.array([self.x, self.y, self.z])

    @classmethod
    def from_array(cls, arr: NDArray[np.float64]) -> "Position":
        """Construct from a (3,) array."""
        if len(arr) != 3:
            raise ValueError(f"Expected 3 elements, got {len(arr)}")
        return cls(x=float(arr[0]), y=float(arr[1]), z=float(arr[2]))

    @classmethod
    def origin(cls) -> "Position":
        return cls(0.0, 0.0, 0.0)

    def distance_to(self, other: "Position") -> float:
        """Euclidean distance to another position."""
        return float(np.linalg.norm(self.to_array() - other.to_array()))
