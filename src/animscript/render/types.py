from __future__ import annotations

from dataclasses import dataclass

from manim import BLUE_C, PINK, WHITE

ANIM_DURATION = 0.5
FLASH_DURATION = 0.8
STROKE_WIDTH = 3.0
FILL_OPACITY = 0.15

STROKE_COLOR = WHITE
FILL_COLOR = BLUE_C
HIGHLIGHT_COLOR = PINK


@dataclass
class RenderConfig:
    """
    Rendering options for the manim host.

    ``unit_scale`` converts script units to scene units and ``shift_step`` is
    how far (in script units) one ``shift`` moves an object. Script space is
    y-down unless ``flip_y`` is turned off.
    """

    background_color: str = ""
    stroke_color: str = ""
    fill_color: str = ""
    highlight_color: str = ""
    unit_scale: float = 0.02
    shift_step: float = 50.0
    flip_y: bool = True
    run_time: float = ANIM_DURATION
    quality: str = "l"
