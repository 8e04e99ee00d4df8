"""Simulation configuration.

Defines the configuration used to set up a run: grid size, where the ant
starts, which way it faces, how many steps it may take and how fast the
driver paces them. Defaults give a small grid that fits in a terminal.
"""
from dataclasses import dataclass, field
from typing import Tuple

from .ant import Direction


@dataclass
class SimConfig:
    """Simulation settings.

    `start` defaults to the centre cell. `delay` is only used by the
    driver loop; the engine itself has no notion of time.
    """
    width: int = 11
    height: int = 11
    start: Tuple[int, int] = field(default=None)
    direction: str = "north"
    steps: int = 100
    # seconds to wait between steps when running through the driver
    delay: float = 0.0
    debug: bool = False

    def __post_init__(self):
        if self.start is None and isinstance(self.width, int) and isinstance(self.height, int):
            self.start = (self.width // 2, self.height // 2)

    def validate(self) -> None:
        """Sanity-check the configuration.

        Raises `ValueError` with a human-friendly message when a value is
        wrong (negative sizes, a start cell off the grid, an unknown
        direction, etc.).
        """
        for name in ("width", "height"):
            value = getattr(self, name)
            if not isinstance(value, int) or isinstance(value, bool) or value <= 0:
                raise ValueError(f"{name} must be a positive integer")

        if (
            not isinstance(self.start, tuple)
            or len(self.start) != 2
            or not all(isinstance(v, int) for v in self.start)
        ):
            raise ValueError("start must be a tuple of two integers (x, y)")

        x, y = self.start
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise ValueError("start position must be inside the grid bounds")

        try:
            Direction.parse(self.direction)
        except ValueError:
            names = ", ".join(d.name.lower() for d in Direction)
            raise ValueError(f"direction must be one of {names}") from None

        if not isinstance(self.steps, int) or isinstance(self.steps, bool) or self.steps < 0:
            raise ValueError("steps must be a non-negative integer")

        if not isinstance(self.delay, (int, float)) or self.delay < 0:
            raise ValueError("delay must be a non-negative number of seconds")
