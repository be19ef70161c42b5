import math
from dataclasses import dataclass
from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .camera import Camera
    from .gripper import Gripper

# Identifier of the immovable base. Never stored as a link.
BASE_ID = 0


@dataclass(frozen=True)
class Direction:
    """Orientation of a segment in radians.

    Attributes:
        pitch: Angle from the vertical (Z) axis.
        yaw: Azimuth in the horizontal plane.
        roll: Spin about the segment's own axis. Does not move the chain.
    """

    pitch: float = 0.0
    yaw: float = 0.0
    roll: float = 0.0

    def __post_init__(self) -> None:
        for name in ("pitch", "yaw", "roll"):
            value = getattr(self, name)
            if not math.isfinite(value):
                raise ValueError(f"{name} must be finite, got {value}")


class Link:
    """A rigid segment pivoting at the end of its previous link.

    Args:
        link_id: Unique identifier. BASE_ID is reserved for the base.
        r: Segment length.
        prev_id: Identifier of the link this one is attached to, BASE_ID for the base.
        direction: Initial orientation, upright when omitted.
    """

    kind = "link"

    def __init__(
        self,
        link_id: int,
        r: float,
        prev_id: int = BASE_ID,
        direction: Direction | None = None,
    ) -> None:
        if link_id <= BASE_ID:
            raise ValueError(
                f"link_id must be positive ({BASE_ID} is the base), got {link_id}"
            )
        if not math.isfinite(r) or r <= 0:
            raise ValueError(f"r must be positive and finite, got {r}")
        if prev_id < BASE_ID:
            raise ValueError(f"prev_id must be non-negative, got {prev_id}")
        if prev_id == link_id:
            raise ValueError(f"Link {link_id} can't be attached to itself")
        self._id = link_id
        self._r = float(r)
        self._prev_id = prev_id
        self._direction = direction or Direction()

    @property
    def id(self) -> int:
        return self._id

    @property
    def r(self) -> float:
        return self._r

    @property
    def prev_id(self) -> int:
        return self._prev_id

    @property
    def direction(self) -> Direction:
        return self._direction

    def set_direction(self, pitch: float, yaw: float, roll: float = 0.0) -> None:
        """Replace the orientation. Raises ValueError for non-finite angles."""
        self._direction = Direction(float(pitch), float(yaw), float(roll))

    def as_gripper(self) -> Optional["Gripper"]:
        """Return self if this link can grip, otherwise None."""
        return None

    def as_camera(self) -> Optional["Camera"]:
        """Return self if this link carries a camera, otherwise None."""
        return None

    def details(self) -> str:
        """Kind-specific state for structure dumps."""
        return ""

    def describe(self) -> list[str]:
        """Row of cells describing this link: id, kind, r, prev, angles, details."""
        d = self._direction
        return [
            str(self._id),
            self.kind,
            f"{self._r:.3f}",
            str(self._prev_id),
            f"{d.pitch:.3f}",
            f"{d.yaw:.3f}",
            f"{d.roll:.3f}",
            self.details(),
        ]

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(link_id={self._id}, r={self._r}, "
            f"prev_id={self._prev_id}, direction={self._direction})"
        )
