"""Langton's ant package exports."""
from .config import SimConfig
from .grid import AntGrid, Color
from .ant import Ant, Direction, DX, DY
from .errors import OutOfRangeError, InvariantViolation
from .simulation import Simulation

__all__ = [
    "SimConfig",
    "AntGrid",
    "Color",
    "Ant",
    "Direction",
    "DX",
    "DY",
    "OutOfRangeError",
    "InvariantViolation",
    "Simulation",
]
