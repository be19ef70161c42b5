"""Exceptions raised or reported by the manipulator model."""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from .kinematics.position import Position


class ManipulatorError(Exception):
    """Base class for all manipulator errors.

    Errors of the same type built from the same data compare equal, so
    repeated resolutions of an unchanged arm give equal results.
    """

    def __eq__(self, other: object) -> bool:
        if type(self) is not type(other):
            return NotImplemented
        return self.args == other.args and vars(self) == vars(other)

    def __hash__(self) -> int:
        return hash((type(self), self.args))


class DuplicateLinkError(ManipulatorError):
    """A link with the same identifier is already registered."""

    def __init__(self, link_id: int) -> None:
        super().__init__(f"Link with id {link_id} already exists")
        self.link_id = link_id


class UnknownLinkError(ManipulatorError, KeyError):
    """An operation referenced an identifier that is not registered."""

    def __init__(self, link_id: int) -> None:
        super().__init__(f"Link with id {link_id} doesn't exist")
        self.link_id = link_id

    def __str__(self) -> str:
        # KeyError would otherwise repr() the message
        return str(self.args[0])


class IncompleteChainError(ManipulatorError):
    """The walk from a link did not reach the base."""

    def __init__(self, target_id: int, missing_id: int) -> None:
        super().__init__(
            f"Incomplete chain to link {target_id}: link {missing_id} is not reachable"
        )
        self.target_id = target_id
        self.missing_id = missing_id


class RootOrientationOutOfRangeError(ManipulatorError):
    """The link attached to the base points outside the allowed range."""

    def __init__(
        self,
        link_id: int,
        pitch: float,
        yaw: float,
        pitch_limit: float,
        yaw_limit: float,
    ) -> None:
        super().__init__(
            f"Link {link_id} on the base must have pitch <= {pitch_limit:.4f} "
            f"and yaw <= {yaw_limit:.4f}: pitch={pitch:.4f}, yaw={yaw:.4f}"
        )
        self.link_id = link_id
        self.pitch = pitch
        self.yaw = yaw
        self.pitch_limit = pitch_limit
        self.yaw_limit = yaw_limit


class CollisionDetectedError(ManipulatorError):
    """Two links of a chain lie closer than the minimum separation."""

    def __init__(
        self, link_id: int, other_id: int, position: "Position", distance: float
    ) -> None:
        super().__init__(
            f"Collision detected for link {link_id} at position "
            f"({position.x:.4f}, {position.y:.4f}, {position.z:.4f}): "
            f"{distance:.4f} from link {other_id}"
        )
        self.link_id = link_id
        self.other_id = other_id
        self.position = position
        self.distance = distance


class UnsupportedCapabilityError(ManipulatorError):
    """The link does not provide the requested capability."""

    def __init__(self, link_id: int, capability: str) -> None:
        super().__init__(f"Link {link_id} is not a {capability}!")
        self.link_id = link_id
        self.capability = capability
