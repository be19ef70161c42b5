import time
from dataclasses import dataclass
from logging import getLogger
from typing import override

from .link import Direction, Link

logger = getLogger(__name__)


@dataclass(frozen=True)
class Photo:
    """Record of a captured frame: which link took it, its direction, when."""

    link_id: int
    direction: Direction
    timestamp: float


class Camera(Link):
    """Link carrying a camera at its end point."""

    kind = "camera"

    def __init__(
        self,
        link_id: int,
        r: float,
        prev_id: int = 0,
        direction: Direction | None = None,
    ) -> None:
        super().__init__(link_id, r, prev_id, direction)
        self._photos: list[Photo] = []

    @property
    def photos(self) -> list[Photo]:
        return list(self._photos)

    def take_a_photo(self) -> Photo:
        photo = Photo(link_id=self.id, direction=self.direction, timestamp=time.time())
        self._photos.append(photo)
        logger.info(f"Camera {self.id} took photo #{len(self._photos)}")
        return photo

    @override
    def as_camera(self) -> "Camera":
        return self

    @override
    def details(self) -> str:
        return f"photos={len(self._photos)}"
