"""Build a small arm, move it around and print where its links end up.

Run: python examples/demo_manipulator.py
"""

import logging
import math

from rich import print as rprint

from manipy import Camera, Direction, Gripper, Link, Manipulator

logging.basicConfig(level=logging.INFO)
logger = logging.getLogger(__name__)


def main() -> None:
    arm = Manipulator()
    arm.add_link(Link(1, 5.0))
    arm.add_link(Link(2, 3.0, prev_id=1, direction=Direction(math.pi / 2, 0.0)))
    arm.add_link(Gripper(3, 1.0, prev_id=2, direction=Direction(math.pi / 2, math.pi / 2)))
    arm.add_link(Camera(4, 0.5, prev_id=1, direction=Direction(math.pi / 4, math.pi)))

    # rejected: id 2 is taken
    arm.add_link(Link(2, 1.0, prev_id=1))

    arm.print_structure()
    for link_id, result in arm.calculate_positions().items():
        rprint(f"link {link_id}: {result.position if result.success else result.error}")

    arm.open_gripper(3, math.pi / 6)
    arm.take_photo(4)
    arm.take_photo(3)  # not a camera

    # fold link 2 straight down so a new link lands back on link 1
    arm.set_direction(2, math.pi, 0.0)
    arm.add_link(Link(5, 3.0, prev_id=2))
    result = arm.calculate_position(5)
    logger.info(f"link 5 resolved: {result.success} ({result.error})")

    arm.print_structure()


if __name__ == "__main__":
    main()
