from __future__ import annotations

import logging
import shutil
import subprocess
import sys
import tempfile
import textwrap
from pathlib import Path

from manim import DOWN, UP, FadeIn, Scene, Text, YELLOW_C

from ..context import AnimationContext
from ..interpreter import execute_all
from .scene import ManimAnimationHooks
from .types import RenderConfig

logger = logging.getLogger(__name__)


def render_script(
    source: str,
    path: str,
    fps: int = 30,
    title: str = "",
    config: RenderConfig | None = None,
) -> Path:
    """
    Render an animation script to a media file with manim.

    The script is executed once against a bare context first, so lexing,
    syntax and name errors are raised here instead of inside the manim
    subprocess.
    """
    cfg = config or RenderConfig()
    out = Path(path).resolve()

    dry_run = execute_all(source, AnimationContext())
    logger.info("render_script: script ok (%d objects left) -> %s", len(dry_run), out)

    format_ext = out.suffix.lower().lstrip(".") or "mp4"
    if format_ext == "mov":
        format_ext = "mp4"
    output_name = out.stem if out.suffix else out.name

    scene_src = _generate_scene_source(source, title=title, config=cfg)

    with tempfile.TemporaryDirectory(prefix="animscript_") as tmp:
        script = Path(tmp) / "_animscript_scene.py"
        script.write_text(scene_src, encoding="utf-8")

        cmd = [
            sys.executable,
            "-m",
            "manim",
            "render",
            f"-q{cfg.quality}",
            "--format",
            format_ext,
            "--fps",
            str(fps),
            "--media_dir",
            tmp,
            "-o",
            output_name,
            str(script),
            "AnimScriptScene",
        ]
        result = subprocess.run(cmd, capture_output=True, text=True)
        if result.returncode != 0:
            logger.error("render_script: manim stderr: %s", result.stderr)
            raise RuntimeError(f"manim render failed (exit {result.returncode})")

        candidates = list(Path(tmp).rglob(f"{output_name}.{format_ext}"))
        if not candidates:
            candidates = list(Path(tmp).rglob(out.name))
        if not candidates:
            raise RuntimeError(
                f"manim render succeeded but output file was not found for {out.name}"
            )

        out.parent.mkdir(parents=True, exist_ok=True)
        shutil.move(str(candidates[0]), str(out))
        logger.info("render_script: moved output to %s", out)

    return out


def _generate_scene_source(source: str, title: str = "", config: RenderConfig | None = None) -> str:
    cfg = config or RenderConfig()
    header = [
        "from __future__ import annotations",
        "from manim import Scene",
        "from animscript.render import RenderConfig, render_script_inline",
        "",
        f"SOURCE = {source!r}",
        "",
    ]
    scene_src = textwrap.dedent(
        f"""\
        class AnimScriptScene(Scene):
            def construct(self):
                cfg = RenderConfig(
                    background_color={cfg.background_color!r},
                    stroke_color={cfg.stroke_color!r},
                    fill_color={cfg.fill_color!r},
                    highlight_color={cfg.highlight_color!r},
                    unit_scale={cfg.unit_scale!r},
                    shift_step={cfg.shift_step!r},
                    flip_y={cfg.flip_y!r},
                    run_time={cfg.run_time!r},
                    quality={cfg.quality!r},
                )
                render_script_inline(self, SOURCE, title={title!r}, config=cfg)
        """
    )
    return "\n".join(header) + scene_src


def render_script_inline(
    scene: Scene,
    source: str,
    title: str = "",
    config: RenderConfig | None = None,
) -> AnimationContext:
    """Play ``source`` inside an existing ``Scene.construct``; return the final context."""
    cfg = config or RenderConfig()
    logger.info("render_script_inline: %d chars of source", len(source))

    if cfg.background_color:
        scene.camera.background_color = cfg.background_color

    if title:
        t = Text(title, font="Menlo", font_size=30, color=YELLOW_C)
        t.to_edge(UP, buff=0.3)
        scene.play(FadeIn(t, shift=DOWN * 0.15), run_time=0.3)

    hooks = ManimAnimationHooks(scene, config=cfg)
    context = execute_all(source, AnimationContext(hooks))

    hooks.clear()
    scene.wait(1.0)
    return context
