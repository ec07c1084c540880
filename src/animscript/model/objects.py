from __future__ import annotations

from dataclasses import dataclass, field

from .geometry import Vector2
from .shapes import Shape


@dataclass
class AnimationObject:
    """
    A named drawable: the shapes given by ``define`` plus a mutable position.

    Shapes are fixed once the defining command is parsed; only ``position``
    changes afterwards (through ``place`` and host-side ``shift`` handling).
    """

    shapes: list[Shape] = field(default_factory=list)
    position: Vector2 = field(default_factory=Vector2)

    def add_shape(self, shape: Shape) -> None:
        self.shapes.append(shape)

    def copy(self) -> "AnimationObject":
        return AnimationObject(shapes=list(self.shapes), position=self.position)
