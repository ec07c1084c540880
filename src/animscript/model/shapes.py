from __future__ import annotations

import enum
from dataclasses import dataclass

from .geometry import Vector2


class ShapeType(enum.Enum):
    LINE = "line"
    CIRCLE = "circle"


class Shape:
    """Base for the primitives an object is drawn from. Coordinates are object-local."""

    @property
    def type(self) -> ShapeType:
        raise NotImplementedError


@dataclass(frozen=True)
class LineShape(Shape):
    start: Vector2
    end: Vector2

    @property
    def type(self) -> ShapeType:
        return ShapeType.LINE


@dataclass(frozen=True)
class CircleShape(Shape):
    center: Vector2
    radius: float

    @property
    def type(self) -> ShapeType:
        return ShapeType.CIRCLE
