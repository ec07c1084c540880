from .runtime import render_script, render_script_inline
from .scene import ManimAnimationHooks
from .text import TextTimeline, render_objects_text
from .types import RenderConfig

__all__ = [
    'ManimAnimationHooks',
    'RenderConfig',
    'TextTimeline',
    'render_objects_text',
    'render_script',
    'render_script_inline',
]
