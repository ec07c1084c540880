from __future__ import annotations

import numpy as np

from ..model import Direction, Vector2
from .types import RenderConfig


def _to_point(vec: Vector2, config: RenderConfig) -> np.ndarray:
    """Script coordinates -> manim scene point."""
    y = -vec.y if config.flip_y else vec.y
    return np.array([vec.x * config.unit_scale, y * config.unit_scale, 0.0])


def _to_length(value: float, config: RenderConfig) -> float:
    return float(value) * config.unit_scale


def _shift_offset(direction: Direction, config: RenderConfig) -> Vector2:
    """Script-space displacement of one ``shift``."""
    return direction.unit * config.shift_step
