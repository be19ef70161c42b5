"""Point-distance self-collision check for a resolved chain."""

from typing import Sequence

import numpy as np

from ..config.manipulator_config import ManipulatorConfig
from ..registry import LinkRegistry
from .position import Position
from .transforms import stack_displacements


class CollisionChecker:
    """Rejects a link placed within ``min_separation`` of an earlier link.

    Only end points are compared, so this detects links folding back onto
    each other, not segments crossing. The base origin is not a collision
    partner.
    """

    def __init__(self, registry: LinkRegistry, config: ManipulatorConfig | None = None) -> None:
        self._registry = registry
        self._config = config or ManipulatorConfig()

    def find_collision(
        self,
        chain: Sequence[int],
        current_index: int,
        current_position: Position,
    ) -> int | None:
        """Index of the first earlier link too close to ``current_position``.

        Every earlier position is recomputed from the root, independently of
        what the caller accumulated.

        Returns:
            Index into ``chain`` of the colliding link, or None.
        """
        segments = []
        for link_id in chain[:current_index]:
            link = self._registry.get(link_id)
            d = link.direction
            segments.append((link.r, d.pitch, d.yaw))
        displacements = stack_displacements(segments)

        current = current_position.to_array()
        for i in range(current_index):
            earlier = np.sum(displacements[: i + 1], axis=0)
            distance = float(np.linalg.norm(current - earlier))
            if distance < self._config.min_separation:
                return i
        return None

    def has_no_collision(
        self,
        chain: Sequence[int],
        current_index: int,
        current_position: Position,
    ) -> bool:
        return self.find_collision(chain, current_index, current_position) is None
