"""
animscript.interpreter — wire the pipeline together.

    source -> tokenize -> parse -> flatten -> AnimationContext.execute

Each stage is lazy, so executing a script interleaves lexing, parsing and
execution one command at a time, and a failure surfaces only after every
command before it has already run.
"""

from __future__ import annotations

import itertools
import logging
from typing import Iterable, Iterator, Optional, Union

from .context import AnimationContext, AnimationHooks
from .flatten import flatten
from .lexing import Token, tokenize
from .model import AtomicCommand, Command
from .parsing import parse

logger = logging.getLogger(__name__)

__all__ = ["commands", "execute_all", "run_script"]

ScriptInput = Union[str, Iterable[Token], Iterable[Command]]


def commands(source: str) -> Iterator[AtomicCommand]:
    """Lazy stream of the atomic commands a script executes."""
    return flatten(parse(tokenize(source)))


def _atomic_stream(script: ScriptInput) -> Iterator[AtomicCommand]:
    if isinstance(script, str):
        return commands(script)

    items = iter(script)
    try:
        first = next(items)
    except StopIteration:
        return iter(())
    rest = itertools.chain([first], items)
    if isinstance(first, Token):
        return flatten(parse(rest))
    return flatten(rest)


def execute_all(
    script: ScriptInput,
    context: Optional[AnimationContext] = None,
) -> AnimationContext:
    """
    Execute every atomic command of ``script`` against ``context``.

    ``script`` may be source text, a token stream or a command stream.
    A bare :class:`AnimationContext` is created when ``context`` is omitted.
    """
    ctx = context if context is not None else AnimationContext()
    logger.info("execute_all: start context=%r", ctx)
    count = ctx.run(_atomic_stream(script))
    logger.info("execute_all: %d commands executed, %d objects live", count, len(ctx))
    return ctx


def run_script(source: str, hooks: Optional[AnimationHooks] = None) -> AnimationContext:
    return execute_all(source, AnimationContext(hooks))
