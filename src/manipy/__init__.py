from .config import ManipulatorConfig
from .errors import (
    CollisionDetectedError,
    DuplicateLinkError,
    IncompleteChainError,
    ManipulatorError,
    RootOrientationOutOfRangeError,
    UnknownLinkError,
    UnsupportedCapabilityError,
)
from .kinematics import ChainResolver, CollisionChecker, Position, PositionResult
from .links import Camera, Direction, Gripper, Link
from .manipulator import Manipulator
from .registry import LinkRegistry

__all__ = [
    "Camera",
    "ChainResolver",
    "CollisionChecker",
    "CollisionDetectedError",
    "Direction",
    "DuplicateLinkError",
    "Gripper",
    "IncompleteChainError",
    "Link",
    "LinkRegistry",
    "Manipulator",
    "ManipulatorConfig",
    "ManipulatorError",
    "Position",
    "PositionResult",
    "RootOrientationOutOfRangeError",
    "UnknownLinkError",
    "UnsupportedCapabilityError",
]
