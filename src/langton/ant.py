"""The ant and its turn/move rule.

Direction encoding: 0 = north, then clockwise. A right turn adds one
(mod 4), a left turn subtracts one. `DX`/`DY` give the move offsets, with
y growing downwards (north is `y - 1`).
"""
from enum import IntEnum
from typing import Tuple

import numpy as np

from .grid import AntGrid, Color
from .errors import InvariantViolation

DX = np.array([0, 1, 0, -1], dtype=np.int8)
DY = np.array([-1, 0, 1, 0], dtype=np.int8)

# Display helpers: rotation in degrees (north up) and a text glyph.
ROTATION = (0, 90, 180, 270)
GLYPHS = ("^", ">", "v", "<")


class Direction(IntEnum):
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3

    def turn_right(self) -> "Direction":
        return Direction((self + 1) & 3)

    def turn_left(self) -> "Direction":
        return Direction((self - 1) & 3)

    @property
    def delta(self) -> Tuple[int, int]:
        return int(DX[self]), int(DY[self])

    @property
    def rotation(self) -> int:
        return ROTATION[self]

    @property
    def glyph(self) -> str:
        return GLYPHS[self]

    @classmethod
    def parse(cls, value) -> "Direction":
        """Accept a Direction, its name (any case) or its integer value."""
        if isinstance(value, cls):
            return value
        if isinstance(value, str):
            try:
                return cls[value.strip().upper()]
            except KeyError:
                raise ValueError(f"unknown direction: {value!r}") from None
        if isinstance(value, (int, np.integer)) and not isinstance(value, bool):
            return cls(int(value))
        raise ValueError(f"unknown direction: {value!r}")


class Ant:
    """Single ant: position, direction and remaining step budget.

    The ant does not own the grid; it only reads and flips cells through
    the grid's public accessors and leaves bounds checking to it.
    """

    def __init__(self, position, direction, steps_left: int, grid: AntGrid):
        """Place a new ant on `grid` at `position` = (x, y)."""
        if not isinstance(steps_left, (int, np.integer)) or isinstance(steps_left, bool) or steps_left < 0:
            raise ValueError("steps_left must be a non-negative integer")
        x, y = (int(v) for v in position)
        # Probe the cell so an off-grid start fails here with OutOfRangeError.
        grid.get(x, y)

        self.grid = grid
        self.x = x
        self.y = y
        self.direction = Direction.parse(direction)
        self._steps_left = int(steps_left)

    @property
    def position(self) -> Tuple[int, int]:
        return self.x, self.y

    @property
    def steps_left(self) -> int:
        return self._steps_left

    @steps_left.setter
    def steps_left(self, value: int) -> None:
        """Lower the remaining budget; 0 stops the ant before its next step."""
        if not isinstance(value, (int, np.integer)) or isinstance(value, bool):
            raise ValueError(f"steps_left must be an integer, got {value!r}")
        value = int(value)
        if value < 0:
            raise InvariantViolation("steps_left cannot be negative")
        if value > self._steps_left:
            raise InvariantViolation(
                f"steps_left can only decrease (currently {self._steps_left}, got {value})"
            )
        self._steps_left = value

    @property
    def finished(self) -> bool:
        return self._steps_left == 0

    def turn(self, color: Color) -> None:
        """White turns right, black turns left."""
        if color == Color.WHITE:
            self.direction = self.direction.turn_right()
        else:
            self.direction = self.direction.turn_left()

    def move_one_step(self) -> None:
        """Advance one cell in the current direction, wrapping at the edges."""
        dx, dy = self.direction.delta
        self.x, self.y = self.grid.wrap(self.x + dx, self.y + dy)

    def step(self) -> None:
        """Advance the simulation by one tick.

        The sequence is:
          1. Do nothing if no steps are left.
          2. Read the colour under the ant.
          3. Turn right on white, left on black.
          4. Flip the cell the ant stands on.
          5. Move one cell forward (toroidal wrap).
          6. Use up one step.
        """
        if self._steps_left == 0:
            return

        color = self.grid.get(self.x, self.y)
        self.turn(color)
        self.grid.set(self.x, self.y, color.flipped())
        self.move_one_step()
        self._steps_left -= 1

    def __repr__(self) -> str:
        return (
            f"Ant(position={self.position}, direction={self.direction.name}, "
            f"steps_left={self._steps_left})"
        )
