import threading
from logging import getLogger
from typing import Dict

from rich.console import Console
from rich.table import Table

from .config.manipulator_config import ManipulatorConfig
from .errors import UnknownLinkError, UnsupportedCapabilityError
from .kinematics.chain import ChainResolver
from .kinematics.result import PositionResult
from .links.link import Link
from .registry import LinkRegistry

logger = getLogger(__name__)

_STRUCTURE_COLUMNS = ("ID", "Kind", "r", "Prev", "Pitch", "Yaw", "Roll", "State")


class Manipulator:
    """Chain of links pivoting on a fixed base.

    Links are handed over with :meth:`add_link` and owned by the manipulator
    afterwards. All public methods hold an internal lock, so directions may be
    updated from one thread while positions are computed in another, as long
    as every update goes through the manipulator's own methods.

    Usage::

        arm = Manipulator()
        arm.add_link(Link(1, r=5.0))
        arm.add_link(Gripper(2, r=1.0, prev_id=1))
        arm.set_direction(2, pitch=math.pi / 2, yaw=0.0)
        result = arm.calculate_position(2)
        if result.success:
            print(result.position)
    """

    def __init__(self, config: ManipulatorConfig | None = None) -> None:
        self._config = config or ManipulatorConfig()
        self._registry = LinkRegistry()
        self._resolver = ChainResolver(self._registry, self._config)
        self._lock = threading.RLock()

    @property
    def config(self) -> ManipulatorConfig:
        return self._config

    @property
    def link_ids(self) -> list[int]:
        with self._lock:
            return self._registry.ids()

    def __len__(self) -> int:
        return len(self._registry)

    def add_link(self, link: Link) -> bool:
        """Take ownership of ``link``. Returns False if its id is already taken."""
        with self._lock:
            return self._registry.insert(link)

    def get_link(self, link_id: int) -> Link | None:
        """The registered link itself, not a copy.

        Mutating it directly bypasses the lock. When other threads resolve
        positions, change directions with :meth:`set_direction` and grippers
        or cameras with the dispatch methods instead.
        """
        with self._lock:
            return self._registry.lookup(link_id)

    def set_direction(
        self, link_id: int, pitch: float, yaw: float, roll: float = 0.0
    ) -> None:
        """Point a link in a new direction.

        Raises:
            UnknownLinkError: If no link with ``link_id`` is registered.
            ValueError: If an angle is not finite.
        """
        with self._lock:
            try:
                link = self._registry.get(link_id)
            except UnknownLinkError as e:
                logger.error(str(e))
                raise
            link.set_direction(pitch, yaw, roll)

    def calculate_position(self, link_id: int) -> PositionResult:
        """Absolute position of a link in the base frame.

        Incomplete chains, a root link pointing out of range and collisions
        come back as a failed result rather than an exception.
        """
        with self._lock:
            return self._resolver.resolve(link_id)

    def calculate_positions(self) -> Dict[int, PositionResult]:
        """Resolve every registered link, in identifier order."""
        with self._lock:
            return {link_id: self._resolver.resolve(link_id) for link_id in self._registry.ids()}

    def open_gripper(self, link_id: int, angle: float) -> bool:
        with self._lock:
            link = self._lookup_for_dispatch(link_id)
            gripper = link.as_gripper() if link is not None else None
            if gripper is None:
                return self._unsupported(link_id, "gripper", link)
            try:
                gripper.open(angle)
            except ValueError as e:
                logger.error(f"Can't open gripper {link_id}: {e}")
                return False
            return True

    def close_gripper(self, link_id: int) -> bool:
        with self._lock:
            link = self._lookup_for_dispatch(link_id)
            gripper = link.as_gripper() if link is not None else None
            if gripper is None:
                return self._unsupported(link_id, "gripper", link)
            gripper.close()
            return True

    def take_photo(self, link_id: int) -> bool:
        with self._lock:
            link = self._lookup_for_dispatch(link_id)
            camera = link.as_camera() if link is not None else None
            if camera is None:
                return self._unsupported(link_id, "camera", link)
            camera.take_a_photo()
            return True

    def print_structure(self, console: Console | None = None) -> None:
        """Print every link as a table row, in identifier order."""
        table = Table(title="Manipulator Structure")
        for name in _STRUCTURE_COLUMNS:
            table.add_column(name, style="cyan" if name == "ID" else None, no_wrap=True)
        with self._lock:
            for link in self._registry:
                table.add_row(*link.describe())
        (console or Console()).print(table)

    def _lookup_for_dispatch(self, link_id: int) -> Link | None:
        link = self._registry.lookup(link_id)
        if link is None:
            logger.error(str(UnknownLinkError(link_id)))
        return link

    @staticmethod
    def _unsupported(link_id: int, capability: str, link: Link | None) -> bool:
        if link is not None:
            logger.error(str(UnsupportedCapabilityError(link_id, capability)))
        return False
