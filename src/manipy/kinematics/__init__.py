"""Kinematics module for manipy: link chain positions and collision checks."""

from .chain import ChainResolver
from .collision import CollisionChecker
from .position import Position
from .result import PositionResult
from .transforms import spherical_displacement

__all__ = [
    "ChainResolver",
    "CollisionChecker",
    "Position",
    "PositionResult",
    "spherical_displacement",
]
