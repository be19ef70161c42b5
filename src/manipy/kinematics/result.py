from dataclasses import dataclass, field
from typing import Tuple

from ..errors import ManipulatorError
from .position import Position


@dataclass
class PositionResult:
    """Result from resolving a link position.

    Attributes:
        position: Absolute position of the target link, None on failure.
        error: Why resolution failed, None on success.
        chain: Link identifiers from the base (exclusive) to the target, as far
            as they could be collected.
    """

    position: Position | None = None
    error: ManipulatorError | None = None
    chain: Tuple[int, ...] = field(default_factory=tuple)

    @property
    def success(self) -> bool:
        return self.error is None

    def unwrap(self) -> Position:
        """Return the position or raise the carried error."""
        if self.error is not None:
            raise self.error
        if self.position is None:
            raise ValueError("PositionResult carries neither a position nor an error")
        return self.position

    @classmethod
    def ok(cls, position: Position, chain: Tuple[int, ...]) -> "PositionResult":
        return cls(position=position, chain=chain)

    @classmethod
    def failed(
        cls, error: ManipulatorError, chain: Tuple[int, ...] = ()
    ) -> "PositionResult":
        return cls(error=error, chain=chain)
