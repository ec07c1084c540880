from __future__ import annotations

from manim import Circle, Line, ManimColor, VGroup, VMobject

from ..model import AnimationObject, CircleShape, LineShape, Shape, ShapeType
from .geometry import _to_length, _to_point
from .types import FILL_COLOR, FILL_OPACITY, STROKE_COLOR, STROKE_WIDTH, RenderConfig


def _stroke(config: RenderConfig) -> ManimColor:
    return ManimColor(config.stroke_color) if config.stroke_color else STROKE_COLOR


def _fill(config: RenderConfig) -> ManimColor:
    return ManimColor(config.fill_color) if config.fill_color else FILL_COLOR


def _make_line_mob(shape: LineShape, config: RenderConfig) -> VMobject:
    return Line(
        _to_point(shape.start, config),
        _to_point(shape.end, config),
        color=_stroke(config),
        stroke_width=STROKE_WIDTH,
    )


def _make_circle_mob(shape: CircleShape, config: RenderConfig) -> VMobject:
    circle = Circle(
        radius=_to_length(shape.radius, config),
        color=_stroke(config),
        stroke_width=STROKE_WIDTH,
    )
    circle.set_fill(_fill(config), opacity=FILL_OPACITY)
    circle.move_to(_to_point(shape.center, config))
    return circle


_SHAPE_MOBS = {
    ShapeType.LINE: _make_line_mob,
    ShapeType.CIRCLE: _make_circle_mob,
}


def _make_shape_mob(shape: Shape, config: RenderConfig) -> VMobject:
    make = _SHAPE_MOBS.get(shape.type)
    if make is None:
        raise TypeError(f"No mobject for shape {type(shape).__name__}")
    return make(shape, config)


def _make_object_mob(obj: AnimationObject, config: RenderConfig) -> VGroup:
    """Group of the object's shapes, translated to its current position."""
    group = VGroup(*(_make_shape_mob(s, config) for s in obj.shapes))
    group.shift(_to_point(obj.position, config))
    return group
