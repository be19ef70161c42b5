from .manipulator_config import ManipulatorConfig

__all__ = ["ManipulatorConfig"]
