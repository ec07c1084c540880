from __future__ import annotations

import logging
from typing import Mapping, Union

from ..context import AnimationContext, AnimationHooks
from ..model import AnimationObject, Direction, Shape, ShapeType, Vector2

logger = logging.getLogger(__name__)


def _format_shape(shape: Shape) -> str:
    if shape.type is ShapeType.LINE:
        return f"line {shape.start!r} -> {shape.end!r}"
    if shape.type is ShapeType.CIRCLE:
        return f"circle {shape.center!r} r={shape.radius:g}"
    return repr(shape)


def render_objects_text(
    objects: Union[AnimationContext, Mapping[str, AnimationObject]],
    indent: int = 0,
) -> str:
    """Indented text dump of a live object table."""
    table = objects.objects if isinstance(objects, AnimationContext) else objects
    pad = " " * indent
    if not table:
        return f"{pad}∅"

    lines: list[str] = []
    for name, obj in table.items():
        lines.append(f"{pad}[{name}] @ {obj.position!r}")
        for shape in obj.shapes:
            lines.append(f"{pad}    {_format_shape(shape)}")
    return "\n".join(lines)


class TextTimeline(AnimationHooks):
    """
    Records one line per context event and logs it.

    Used as a dry-run stand-in for :class:`ManimAnimationHooks`: ``shift``
    moves by ``shift_step`` the same way so the final positions match a render.
    """

    def __init__(self, shift_step: float = 50.0):
        self.shift_step = shift_step
        self.lines: list[str] = []

    def _emit(self, line: str) -> None:
        self.lines.append(line)
        logger.info("T%d  %s", len(self.lines) - 1, line)

    def on_declared(self, name: str, obj: AnimationObject) -> None:
        self._emit(f"define {name} ({len(obj.shapes)} shapes)")

    def on_placed(self, name: str, obj: AnimationObject, previous: Vector2) -> None:
        self._emit(f"place {name} {previous!r} -> {obj.position!r}")

    def on_shifted(self, name: str, obj: AnimationObject, direction: Direction) -> None:
        previous = obj.position
        obj.position = previous + direction.unit * self.shift_step
        self._emit(f"shift {name} {direction.value} {previous!r} -> {obj.position!r}")

    def on_erased(self, name: str, obj: AnimationObject) -> None:
        self._emit(f"erase {name}")

    def __str__(self) -> str:
        return "\n".join(self.lines)
