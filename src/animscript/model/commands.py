"""
Command nodes produced by the parser.

Atomic commands (define/place/shift/erase) each perform exactly one mutation
on an :class:`~animscript.context.AnimationContext`. ``LoopCommand`` is
structural: it has no ``execute`` and must go through the flattener.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .geometry import Direction, Vector2
from .objects import AnimationObject

if TYPE_CHECKING:
    from ..context import AnimationContext

__all__ = [
    "AtomicCommand",
    "Command",
    "DefineCommand",
    "EraseCommand",
    "LoopCommand",
    "PlaceCommand",
    "ShiftCommand",
]


class Command:
    """Base of every node in a parsed script."""


class AtomicCommand(Command):
    def execute(self, context: AnimationContext) -> None:
        raise NotImplementedError


@dataclass
class DefineCommand(AtomicCommand):
    name: str
    obj: AnimationObject

    def execute(self, context: AnimationContext) -> None:
        # A define inside a loop runs once per pass; each binding gets its own object.
        context.declare(self.name, self.obj.copy())


@dataclass(frozen=True)
class PlaceCommand(AtomicCommand):
    name: str
    position: Vector2

    def execute(self, context: AnimationContext) -> None:
        context.place(self.name, self.position)


@dataclass(frozen=True)
class ShiftCommand(AtomicCommand):
    name: str
    direction: Direction

    def execute(self, context: AnimationContext) -> None:
        context.shift(self.name, self.direction)


@dataclass(frozen=True)
class EraseCommand(AtomicCommand):
    name: str

    def execute(self, context: AnimationContext) -> None:
        context.erase(self.name)


@dataclass(frozen=True)
class LoopCommand(Command):
    """``count`` repetitions of ``body``; a count of zero or less repeats nothing."""

    count: int
    body: tuple[Command, ...] = ()
