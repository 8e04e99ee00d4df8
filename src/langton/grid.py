"""Cell grid for the ant.

The grid stores one colour per cell in a NumPy array laid out
`cells[y, x]` (dtype `uint8`). Callers always address cells as `(x, y)`;
every read and write goes through a bounds check, and the grid is the
only component that performs one.
"""
import operator
from enum import IntEnum
from typing import Tuple

import numpy as np

from .errors import OutOfRangeError


class Color(IntEnum):
    WHITE = 0
    BLACK = 1

    def flipped(self) -> "Color":
        return Color.BLACK if self is Color.WHITE else Color.WHITE


# Text glyphs for plain cells. The ant is drawn with its direction glyph.
CELL_GLYPHS = {Color.WHITE: ".", Color.BLACK: "#"}


class AntGrid:
    """Fixed-size grid of white/black cells, all white at creation."""

    def __init__(self, width: int, height: int):
        for name, value in (("width", width), ("height", height)):
            if not isinstance(value, (int, np.integer)) or isinstance(value, bool) or value <= 0:
                raise ValueError(f"{name} must be a positive integer")
        self._width = int(width)
        self._height = int(height)
        self._cells = np.full((self._height, self._width), Color.WHITE, dtype=np.uint8)

    @property
    def width(self) -> int:
        return self._width

    @property
    def height(self) -> int:
        return self._height

    @property
    def cells(self) -> np.ndarray:
        """Return a copy of the colour array, indexed `[y, x]`."""
        return self._cells.copy()

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self._width and 0 <= y < self._height

    def _check(self, x, y) -> Tuple[int, int]:
        """Return `(x, y)` as plain ints, or raise `OutOfRangeError`."""
        try:
            ix, iy = operator.index(x), operator.index(y)
        except TypeError:
            # non-integral coordinates never name a cell
            raise OutOfRangeError(x, y, self._width, self._height) from None
        if not self.in_bounds(ix, iy):
            raise OutOfRangeError(x, y, self._width, self._height)
        return ix, iy

    def get(self, x: int, y: int) -> Color:
        x, y = self._check(x, y)
        return Color(int(self._cells[y, x]))

    def set(self, x: int, y: int, color) -> None:
        x, y = self._check(x, y)
        # Color(...) raises ValueError for anything that isn't 0/1
        self._cells[y, x] = Color(color)

    def flip(self, x: int, y: int) -> Color:
        """Toggle one cell and return its new colour."""
        x, y = self._check(x, y)
        new = Color(int(self._cells[y, x])).flipped()
        self._cells[y, x] = new
        return new

    def __getitem__(self, pos) -> Color:
        x, y = pos
        return self.get(x, y)

    def __setitem__(self, pos, color) -> None:
        x, y = pos
        self.set(x, y, color)

    def wrap(self, x: int, y: int) -> Tuple[int, int]:
        """Reduce any integer coordinate onto the torus formed by the grid."""
        return x % self._width, y % self._height

    def count(self, color=Color.BLACK) -> int:
        """Number of cells holding `color`."""
        return int(np.count_nonzero(self._cells == Color(color)))

    def to_string(self, ant=None) -> str:
        """Render the grid as text, one line per row, top row first.

        White cells are '.', black cells '#'. If `ant` is given, its cell
        shows the ant's direction glyph instead, so the result always has
        exactly `width * height` glyphs. An ant standing off this grid raises
        `OutOfRangeError`.
        """
        ant_pos = self._check(*ant.position) if ant is not None else None
        lines = []
        for y in range(self._height):
            row = []
            for x in range(self._width):
                if (x, y) == ant_pos:
                    row.append(ant.direction.glyph)
                else:
                    row.append(CELL_GLYPHS[Color(int(self._cells[y, x]))])
            lines.append("".join(row))
        return "\n".join(lines)

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"AntGrid(width={self._width}, height={self._height}, black={self.count()})"
