"""
Example: a cross inside a circle, walked around a square and erased.

Usage:
    python examples/cross.py              # dry-run text preview
    python examples/cross.py --render     # render media/cross.mp4
    manim -pql examples/cross.py CrossScene
"""

import logging
import sys

from manim import Scene

import animscript as asc
from animscript.render import RenderConfig, TextTimeline, render_objects_text, render_script, render_script_inline

SOURCE = """
(define cross (
    (line (0 0) (50 50))
    (line (50 0) (0 50))
    (circle (25 25) 25)
))
(place cross (-100 -50))
(loop 2 (
    (shift cross right)
    (shift cross down)
    (shift cross left)
    (shift cross up)
))
(erase cross)
"""

CONFIG = RenderConfig(shift_step=60.0, highlight_color="#ff77aa")


class CrossScene(Scene):
    def construct(self):
        render_script_inline(self, SOURCE, title="cross", config=CONFIG)


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO, format="%(message)s")
    if "--render" in sys.argv:
        out = render_script(SOURCE, "media/cross.mp4", title="cross", config=CONFIG)
        print(f"Output: {out}")
    else:
        timeline = TextTimeline(shift_step=CONFIG.shift_step)
        context = asc.run_script(SOURCE, timeline)
        print(f"\n{len(timeline.lines)} events, objects left:")
        print(render_objects_text(context, indent=2))
