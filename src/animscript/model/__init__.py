from .commands import (
    AtomicCommand,
    Command,
    DefineCommand,
    EraseCommand,
    LoopCommand,
    PlaceCommand,
    ShiftCommand,
)
from .geometry import Direction, Vector2
from .objects import AnimationObject
from .shapes import CircleShape, LineShape, Shape, ShapeType

__all__ = [
    "AnimationObject",
    "AtomicCommand",
    "CircleShape",
    "Command",
    "DefineCommand",
    "Direction",
    "EraseCommand",
    "LineShape",
    "LoopCommand",
    "PlaceCommand",
    "Shape",
    "ShapeType",
    "ShiftCommand",
    "Vector2",
]
