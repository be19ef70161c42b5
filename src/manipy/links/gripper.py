import math
from logging import getLogger
from typing import override

from .link import Direction, Link

logger = getLogger(__name__)


class Gripper(Link):
    """End link with jaws that can be opened to an angle and closed.

    Args:
        max_opening_rad: Widest opening the jaws accept.
    """

    kind = "gripper"

    def __init__(
        self,
        link_id: int,
        r: float,
        prev_id: int = 0,
        direction: Direction | None = None,
        max_opening_rad: float = math.pi / 2,
    ) -> None:
        super().__init__(link_id, r, prev_id, direction)
        if max_opening_rad <= 0:
            raise ValueError(f"max_opening_rad must be positive, got {max_opening_rad}")
        self._max_opening = max_opening_rad
        self._opening = 0.0

    @property
    def opening(self) -> float:
        """Current jaw opening in radians, 0 when closed."""
        return self._opening

    @property
    def is_open(self) -> bool:
        return self._opening > 0.0

    def open(self, angle: float) -> None:
        if angle < 0 or angle > self._max_opening:
            raise ValueError(
                f"Opening angle must be within [0, {self._max_opening:.4f}], got {angle}"
            )
        self._opening = float(angle)
        logger.info(f"Gripper {self.id} opened to {angle:.3f} rad")

    def close(self) -> None:
        self._opening = 0.0
        logger.info(f"Gripper {self.id} closed")

    @override
    def as_gripper(self) -> "Gripper":
        return self

    @override
    def details(self) -> str:
        return f"opening={self._opening:.3f}" if self.is_open else "closed"
