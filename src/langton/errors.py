"""Errors raised by the ant engine."""


class OutOfRangeError(IndexError):
    """A coordinate fell outside the grid bounds.

    The grid is the only place bounds are checked, so this error surfaces
    straight through `Ant.step()` to the caller.
    """

    def __init__(self, x, y, width, height):
        super().__init__(
            f"cell ({x}, {y}) is outside the {width}x{height} grid"
        )
        self.x = x
        self.y = y
        self.width = width
        self.height = height


class InvariantViolation(RuntimeError):
    """An operation would break the ant's state invariants."""
