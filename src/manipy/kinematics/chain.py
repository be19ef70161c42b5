"""Chain resolution: absolute link positions from per-link directions."""

from logging import getLogger
from typing import Tuple

import numpy as np
from numpy.typing import NDArray

from ..config.manipulator_config import ManipulatorConfig
from ..errors import (
    CollisionDetectedError,
    IncompleteChainError,
    ManipulatorError,
    RootOrientationOutOfRangeError,
)
from ..links.link import BASE_ID, Link
from ..registry import LinkRegistry
from .collision import CollisionChecker
from .position import Position
from .result import PositionResult
from .transforms import spherical_displacement

logger = getLogger(__name__)


class ChainResolver:
    """Forward position solver over the links of a :class:`LinkRegistry`.

    Every link hangs off its previous link, so the position of link *n* is
    the sum of the segment displacements from the base up to *n*::

        p_n = p_{n-1} + r_n * (cos(yaw) sin(pitch), sin(yaw) sin(pitch), cos(pitch))

    Roll spins a segment about its own axis and never moves the chain, which
    keeps the model position-only (no rotation matrices).
    """

    def __init__(
        self,
        registry: LinkRegistry,
        config: ManipulatorConfig | None = None,
        collision_checker: CollisionChecker | None = None,
    ) -> None:
        self._registry = registry
        self._config = config or ManipulatorConfig()
        self._checker = collision_checker or CollisionChecker(registry, self._config)

    @property
    def config(self) -> ManipulatorConfig:
        return self._config

    def chain_to(self, target_id: int) -> Tuple[int, ...]:
        """Identifiers from the base (exclusive) to ``target_id`` (inclusive).

        Raises:
            IncompleteChainError: If an ancestor is missing or the references
                loop without reaching the base.
        """
        walk = []
        seen = set()
        current_id = target_id
        while current_id != BASE_ID:
            link = self._registry.lookup(current_id)
            if link is None or current_id in seen:
                raise IncompleteChainError(target_id, current_id)
            seen.add(current_id)
            walk.append(current_id)
            current_id = link.prev_id
        walk.reverse()
        return tuple(walk)

    @staticmethod
    def displacement(link: Link) -> NDArray[np.float64]:
        d = link.direction
        return spherical_displacement(link.r, d.pitch, d.yaw)

    def resolve(self, target_id: int) -> PositionResult:
        """Compute the absolute position of ``target_id``.

        Failures are logged and returned in the result, never raised.
        """
        try:
            chain = self.chain_to(target_id)
        except IncompleteChainError as e:
            return self._fail(e)

        position = np.zeros(3)
        for i, link_id in enumerate(chain):
            link = self._registry.get(link_id)

            if i == 0:
                error = self._check_root(link)
                if error is not None:
                    return self._fail(error, chain)

            position = position + self.displacement(link)

            if i > 0:
                current = Position.from_array(position)
                hit = self._checker.find_collision(chain, i, current)
                if hit is not None:
                    other = self._resolve_prefix(chain, hit)
                    return self._fail(
                        CollisionDetectedError(
                            link_id, chain[hit], current, current.distance_to(other)
                        ),
                        chain,
                    )

        result = Position.from_array(position)
        logger.debug(f"Link {target_id} resolved at {result} via chain {chain}")
        return PositionResult.ok(result, chain)

    def _check_root(self, link: Link) -> RootOrientationOutOfRangeError | None:
        d = link.direction
        cfg = self._config
        if not (d.pitch <= cfg.root_pitch_limit_rad and d.yaw <= cfg.root_yaw_limit_rad):
            return RootOrientationOutOfRangeError(
                link.id, d.pitch, d.yaw, cfg.root_pitch_limit_rad, cfg.root_yaw_limit_rad
            )
        return None

    def _resolve_prefix(self, chain: Tuple[int, ...], index: int) -> Position:
        total = np.zeros(3)
        for link_id in chain[: index + 1]:
            link = self._registry.get(link_id)
            total = total + self.displacement(link)
        return Position.from_array(total)

    @staticmethod
    def _fail(error: ManipulatorError, chain: Tuple[int, ...] = ()) -> PositionResult:
        logger.warning(str(error))
        return PositionResult.failed(error, chain)
