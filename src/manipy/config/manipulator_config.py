import math
from dataclasses import dataclass


@dataclass
class ManipulatorConfig:
    """Configuration for chain resolution and collision checking.

    Attributes:
        min_separation: Two links of a resolved chain closer than this
            distance are treated as colliding.
        root_pitch_limit_rad: Upper bound for the pitch of the link attached
            directly to the base.
        root_yaw_limit_rad: Upper bound for the yaw of the link attached
            directly to the base.
    """

    min_separation: float = 0.1
    root_pitch_limit_rad: float = math.pi / 2
    root_yaw_limit_rad: float = math.pi / 2

    def __post_init__(self) -> None:
        if self.min_separation < 0:
            raise ValueError(
                f"min_separation must be non-negative, got {self.min_separation}"
            )
