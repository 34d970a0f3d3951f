from typing import NamedTuple


class Point(NamedTuple):
    """Immutable 2D coordinate. Plain ``(x, y)`` tuples compare equal to it."""

    x: float
    y: float

    def __repr__(self):
        return f"Point({self.x}, {self.y})"
