import logging

import pytest

pytest.importorskip("manim")

import animscript as asc
from animscript.render import TextTimeline, render_objects_text


def test_timeline_records_each_event(caplog):
    timeline = TextTimeline(shift_step=10.0)
    with caplog.at_level(logging.INFO, logger="animscript.render.text"):
        asc.run_script(
            """
            (define box ((line (0 0) (1 0)) (line (1 0) (1 1))))
            (place box (5 5))
            (loop 2 ((shift box up)))
            (erase box)
            """,
            timeline,
        )

    assert timeline.lines == [
        "define box (2 shapes)",
        "place box (0, 0) -> (5, 5)",
        "shift box up (5, 5) -> (5, -5)",
        "shift box up (5, -5) -> (5, -15)",
        "erase box",
    ]
    assert "T4  erase box" in caplog.text
    assert str(timeline).count("\n") == 4


def test_render_objects_text():
    ctx = asc.execute_all("(define ring ((circle (1 2) 3.5))) (place ring (10 0)) (define empty ())")
    text = render_objects_text(ctx, indent=2)
    assert text.splitlines() == [
        "  [ring] @ (10, 0)",
        "      circle (1, 2) r=3.5",
        "  [empty] @ (0, 0)",
    ]


def test_render_objects_text_empty_table():
    assert render_objects_text({}) == "∅"


def test_shape_lines_follow_shape_type():
    class _Segment(asc.Shape):
        start = asc.Vector2(0, 0)
        end = asc.Vector2(4, 0)

        @property
        def type(self):
            return asc.ShapeType.LINE

    table = {"seg": asc.AnimationObject(shapes=[_Segment()])}
    assert render_objects_text(table).splitlines()[1] == "    line (0, 0) -> (4, 0)"
