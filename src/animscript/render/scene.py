from __future__ import annotations

import logging

from manim import FadeIn, FadeOut, Indicate, ManimColor, Scene, VGroup

from ..context import AnimationHooks
from ..model import AnimationObject, Direction, Vector2
from .geometry import _shift_offset, _to_point
from .mobjects import _make_object_mob
from .types import FLASH_DURATION, HIGHLIGHT_COLOR, RenderConfig

logger = logging.getLogger(__name__)


class ManimAnimationHooks(AnimationHooks):
    """
    Plays every context event on a manim ``Scene``.

    define fades the object in and flashes it, place and shift tween it to
    the new position, erase fades it out. ``shift`` moves one
    ``config.shift_step`` and writes the new position back to the object.
    """

    def __init__(self, scene: Scene, config: RenderConfig | None = None):
        self.scene = scene
        self.config = config or RenderConfig()
        self._mobs: dict[str, VGroup] = {}

    def _highlight(self) -> ManimColor:
        hc = self.config.highlight_color
        return ManimColor(hc) if hc else HIGHLIGHT_COLOR

    def _move(self, name: str, previous: Vector2, current: Vector2) -> None:
        delta = _to_point(current, self.config) - _to_point(previous, self.config)
        mob = self._mobs[name]
        self.scene.play(mob.animate.shift(delta), run_time=self.config.run_time)

    def on_declared(self, name: str, obj: AnimationObject) -> None:
        mob = _make_object_mob(obj, self.config)
        self._mobs[name] = mob
        logger.debug("manim: declare %s (%d shapes)", name, len(obj.shapes))
        self.scene.play(FadeIn(mob), run_time=self.config.run_time)
        self.scene.play(Indicate(mob, color=self._highlight()), run_time=FLASH_DURATION)

    def on_placed(self, name: str, obj: AnimationObject, previous: Vector2) -> None:
        logger.debug("manim: place %s %r -> %r", name, previous, obj.position)
        self._move(name, previous, obj.position)

    def on_shifted(self, name: str, obj: AnimationObject, direction: Direction) -> None:
        previous = obj.position
        obj.position = previous + _shift_offset(direction, self.config)
        logger.debug("manim: shift %s %s -> %r", name, direction.value, obj.position)
        self._move(name, previous, obj.position)

    def on_erased(self, name: str, obj: AnimationObject) -> None:
        logger.debug("manim: erase %s", name)
        mob = self._mobs.pop(name)
        self.scene.play(FadeOut(mob), run_time=self.config.run_time)

    def clear(self) -> None:
        anims = [FadeOut(m) for m in self._mobs.values()]
        if anims:
            self.scene.play(*anims, run_time=self.config.run_time * 0.4)
        self._mobs.clear()
