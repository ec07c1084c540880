"""
animscript.flatten — expand loops into a linear stream of atomic commands.

The flattener keeps an explicit stack of frames instead of recursing, so
memory is proportional to loop nesting depth and never to the number of
commands the loops expand to.
"""

from __future__ import annotations

import logging
from typing import Iterable, Iterator, Sequence

from .model import AtomicCommand, Command, LoopCommand

logger = logging.getLogger(__name__)

__all__ = ["Flattener", "flatten"]


class _Frame:
    """One in-progress pass over a command sequence."""

    def __init__(self, commands: Iterable[Command]):
        self.commands = iter(commands)

    @property
    def finished(self) -> bool:
        raise NotImplementedError

    def on_iteration_end(self) -> None:
        """Close the current pass, rewinding ``commands`` if another pass is due."""
        raise NotImplementedError


class _InitialFrame(_Frame):
    """The top-level stream: a single pass over a possibly one-shot iterable."""

    def __init__(self, commands: Iterable[Command]):
        super().__init__(commands)
        self._first_pass = True

    @property
    def finished(self) -> bool:
        return not self._first_pass

    def on_iteration_end(self) -> None:
        self._first_pass = False


class _CountedFrame(_Frame):
    def __init__(self, count: int, body: Sequence[Command]):
        super().__init__(body)
        self.body = body
        # An empty body emits nothing however often it runs.
        self.remaining = count if body else 0

    @property
    def finished(self) -> bool:
        return self.remaining <= 0

    def on_iteration_end(self) -> None:
        self.remaining -= 1
        if self.remaining > 0:
            self.commands = iter(self.body)


class Flattener:
    """Iterator yielding only atomic commands, in execution order."""

    def __init__(self, commands: Iterable[Command]):
        self._frames: list[_Frame] = [_InitialFrame(commands)]

    @property
    def depth(self) -> int:
        return len(self._frames)

    def __iter__(self) -> Iterator[AtomicCommand]:
        return self

    def __next__(self) -> AtomicCommand:
        frames = self._frames
        while frames:
            frame = frames[-1]
            if frame.finished:
                frames.pop()
                logger.debug("flatten: pop frame, depth=%d", len(frames))
                continue

            try:
                command = next(frame.commands)
            except StopIteration:
                frame.on_iteration_end()
                continue

            if isinstance(command, LoopCommand):
                frames.append(_CountedFrame(command.count, command.body))
                logger.debug("flatten: push loop x%d, depth=%d", command.count, len(frames))
            elif isinstance(command, AtomicCommand):
                return command
            else:
                raise TypeError(f"Cannot flatten {type(command).__name__}")
        raise StopIteration


def flatten(commands: Iterable[Command]) -> Flattener:
    """Return a lazy iterator over ``commands`` with every loop expanded in place."""
    return Flattener(commands)
