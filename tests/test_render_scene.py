from types import SimpleNamespace

import numpy as np
import pytest

pytest.importorskip("manim")

from manim import Circle, Line

from animscript import (
    AnimationContext,
    AnimationObject,
    CircleShape,
    Direction,
    LineShape,
    Shape,
    ShapeType,
    Vector2,
)
from animscript.render import ManimAnimationHooks, RenderConfig, render_script_inline
from animscript.render.geometry import _shift_offset, _to_point
from animscript.render.mobjects import _make_object_mob, _make_shape_mob


class _FakeScene:
    def __init__(self):
        self.played = []
        self.waits = []
        self.camera = SimpleNamespace(background_color=None)

    def play(self, *anims, run_time=None):
        self.played.append(([type(a).__name__ for a in anims], run_time))

    def wait(self, duration=1.0):
        self.waits.append(duration)


def test_to_point_flips_and_scales():
    cfg = RenderConfig(unit_scale=0.1)
    assert np.allclose(_to_point(Vector2(10, 20), cfg), [1.0, -2.0, 0.0])
    cfg = RenderConfig(unit_scale=0.1, flip_y=False)
    assert np.allclose(_to_point(Vector2(10, 20), cfg), [1.0, 2.0, 0.0])


def test_shift_offset_uses_step():
    cfg = RenderConfig(shift_step=30.0)
    assert _shift_offset(Direction.UP, cfg) == Vector2(0, -30)
    assert _shift_offset(Direction.RIGHT, cfg) == Vector2(30, 0)


def test_object_mob_is_placed_at_object_position():
    cfg = RenderConfig(unit_scale=0.02)
    obj = AnimationObject(
        shapes=[CircleShape(Vector2(25, 25), 25.0), LineShape(Vector2(0, 0), Vector2(50, 50))],
        position=Vector2(50, 0),
    )
    mob = _make_object_mob(obj, cfg)
    assert len(mob.submobjects) == 2
    assert np.allclose(mob.get_center(), [1.5, -0.5, 0.0])


def test_hooks_play_one_animation_per_event():
    scene = _FakeScene()
    hooks = ManimAnimationHooks(scene, RenderConfig(run_time=0.25))
    ctx = AnimationContext(hooks)

    ctx.declare("dot", AnimationObject(shapes=[CircleShape(Vector2(0, 0), 5.0)]))
    ctx.place("dot", Vector2(10, 10))
    ctx.shift("dot", Direction.RIGHT)
    ctx.erase("dot")

    names = [anims[0] for anims, _ in scene.played]
    assert names == ["FadeIn", "Indicate", "_AnimationBuilder", "_AnimationBuilder", "FadeOut"]
    assert scene.played[0][1] == 0.25


def test_shift_moves_object_by_step():
    scene = _FakeScene()
    ctx = AnimationContext(ManimAnimationHooks(scene, RenderConfig(shift_step=40.0)))
    ctx.declare("dot", AnimationObject(shapes=[CircleShape(Vector2(0, 0), 5.0)]))
    ctx.shift("dot", Direction.DOWN)
    ctx.shift("dot", Direction.LEFT)
    assert ctx.get("dot").position == Vector2(-40, 40)


def test_clear_fades_remaining_objects():
    scene = _FakeScene()
    hooks = ManimAnimationHooks(scene)
    ctx = AnimationContext(hooks)
    ctx.declare("a", AnimationObject())
    ctx.declare("b", AnimationObject())
    scene.played.clear()

    hooks.clear()
    assert scene.played == [(["FadeOut", "FadeOut"], pytest.approx(0.2))]
    hooks.clear()
    assert len(scene.played) == 1


def test_render_script_inline_runs_whole_script():
    scene = _FakeScene()
    ctx = render_script_inline(
        scene,
        "(define a ((line (0 0) (1 1)))) (loop 3 ((shift a up))) (define b ())",
        config=RenderConfig(background_color="#101010"),
    )
    assert sorted(ctx.objects) == ["a", "b"]
    assert scene.camera.background_color == "#101010"
    assert scene.played[-1][0] == ["FadeOut", "FadeOut"]
    assert scene.waits == [1.0]


class _TaggedRing(Shape):
    """Circle-tagged shape that is not a ``CircleShape`` subclass."""

    def __init__(self, center, radius):
        self.center = center
        self.radius = radius

    @property
    def type(self):
        return ShapeType.CIRCLE


def test_shape_mob_dispatches_on_shape_type():
    cfg = RenderConfig(unit_scale=0.1)
    mob = _make_shape_mob(_TaggedRing(Vector2(10, 10), 20.0), cfg)
    assert isinstance(mob, Circle)
    assert np.allclose(mob.get_center(), [1.0, -1.0, 0.0])

    line = _make_shape_mob(LineShape(Vector2(0, 0), Vector2(10, 0)), cfg)
    assert isinstance(line, Line)


def test_shape_mob_rejects_untagged_shape():
    class _Blob(Shape):
        @property
        def type(self):
            return None

    with pytest.raises(TypeError, match="No mobject for shape _Blob"):
        _make_shape_mob(_Blob(), RenderConfig())
