from .camera import Camera, Photo
from .gripper import Gripper
from .link import BASE_ID, Direction, Link

__all__ = ["BASE_ID", "Camera", "Direction", "Gripper", "Link", "Photo"]
