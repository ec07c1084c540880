from __future__ import annotations

import enum
from dataclasses import dataclass


@dataclass(frozen=True)
class Vector2:
    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: "Vector2") -> "Vector2":
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, k: float) -> "Vector2":
        return Vector2(self.x * k, self.y * k)

    __rmul__ = __mul__

    def __repr__(self) -> str:
        return f"({self.x:g}, {self.y:g})"


class Direction(enum.Enum):
    """Direction of a ``shift``; values are the script keywords."""

    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"

    @property
    def unit(self) -> Vector2:
        # Script space is y-down, like screen coordinates.
        return _UNIT_VECTORS[self]


_UNIT_VECTORS = {
    Direction.LEFT: Vector2(-1.0, 0.0),
    Direction.RIGHT: Vector2(1.0, 0.0),
    Direction.UP: Vector2(0.0, -1.0),
    Direction.DOWN: Vector2(0.0, 1.0),
}
