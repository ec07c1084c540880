"""
animscript.context — the live object table commands execute against.

The context owns the name -> :class:`AnimationObject` mapping and applies
every required mutation itself. Host applications plug in through an
:class:`AnimationHooks` instance, which is notified *after* the mutation:

    declare  bind name, then ``on_declared(name, obj)``
    place    set position, then ``on_placed(name, obj, previous)``
    shift    no mutation, then ``on_shifted(name, obj, direction)``
    erase    unbind name, then ``on_erased(name, obj)``

So a hook always observes a table in which the name is present iff it has
been declared and not yet erased.
"""

from __future__ import annotations

import logging
from types import MappingProxyType
from typing import Iterable, Mapping, Optional

from .errors import DuplicateNameError, UndeclaredNameError
from .model import AnimationObject, AtomicCommand, Direction, Vector2

logger = logging.getLogger(__name__)

__all__ = ["AnimationContext", "AnimationHooks"]


class AnimationHooks:
    """Host extension points. Every method defaults to doing nothing."""

    def on_declared(self, name: str, obj: AnimationObject) -> None:
        pass

    def on_placed(self, name: str, obj: AnimationObject, previous: Vector2) -> None:
        pass

    def on_shifted(self, name: str, obj: AnimationObject, direction: Direction) -> None:
        pass

    def on_erased(self, name: str, obj: AnimationObject) -> None:
        pass


class AnimationContext:
    def __init__(self, hooks: Optional[AnimationHooks] = None):
        self.hooks = hooks or AnimationHooks()
        self._objects: dict[str, AnimationObject] = {}

    @property
    def objects(self) -> Mapping[str, AnimationObject]:
        """Read-only view of the live name table."""
        return MappingProxyType(self._objects)

    def __contains__(self, name: object) -> bool:
        return name in self._objects

    def __len__(self) -> int:
        return len(self._objects)

    def get(self, name: str) -> Optional[AnimationObject]:
        return self._objects.get(name)

    def _require(self, name: str) -> AnimationObject:
        obj = self._objects.get(name)
        if obj is None:
            raise UndeclaredNameError(name)
        return obj

    def declare(self, name: str, obj: AnimationObject) -> None:
        if not isinstance(name, str) or not name:
            raise TypeError("object name must be a non-empty string")
        if name in self._objects:
            raise DuplicateNameError(name)
        self._objects[name] = obj
        self.hooks.on_declared(name, obj)

    def place(self, name: str, position: Vector2) -> None:
        obj = self._require(name)
        previous = obj.position
        obj.position = position
        self.hooks.on_placed(name, obj, previous)

    def shift(self, name: str, direction: Direction) -> None:
        obj = self._require(name)
        self.hooks.on_shifted(name, obj, direction)

    def erase(self, name: str) -> None:
        obj = self._require(name)
        del self._objects[name]
        self.hooks.on_erased(name, obj)

    def execute(self, command: AtomicCommand) -> None:
        logger.debug("execute: %r", command)
        command.execute(self)

    def run(self, commands: Iterable[AtomicCommand]) -> int:
        """Execute ``commands`` in order; return how many ran."""
        count = 0
        for command in commands:
            self.execute(command)
            count += 1
        return count

    def __repr__(self) -> str:
        return f"AnimationContext({len(self._objects)} objects)"
