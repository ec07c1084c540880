"""
animscript.parsing.parser — recursive-descent parser over a lazy token stream.

Grammar::

    program   = { command } EndOfSource
    command   = "(" ( define | place | shift | erase | loop ) ")"
    define    = "define" identifier draw-list
    draw-list = "(" { shape } ")"
    shape     = "(" ( circle | line ) ")"
    circle    = "circle" vec2 number
    line      = "line" vec2 vec2
    place     = "place" identifier vec2
    shift     = "shift" identifier direction
    erase     = "erase" identifier
    loop      = "loop" number "(" { command } ")"
    vec2      = "(" number number ")"
    direction = "left" | "right" | "up" | "down"

Each ``visit_*`` method for a parenthesised production is entered with the
leading ``(`` already consumed and consumes its own closing ``)``. Number and
direction visits consume no parentheses.
"""

from __future__ import annotations

from typing import Callable, Iterable, Iterator, Optional

from ..errors import ScriptSyntaxError, UnexpectedEndOfInput
from ..lexing.tokens import Token, TokenKind
from ..model import (
    AnimationObject,
    CircleShape,
    Command,
    DefineCommand,
    Direction,
    EraseCommand,
    LineShape,
    LoopCommand,
    PlaceCommand,
    Shape,
    ShiftCommand,
    Vector2,
)

__all__ = ["Parser", "TokenCursor", "parse"]

_DIRECTIONS = {d.value: d for d in Direction}


class TokenCursor:
    """Pull-one-at-a-time view over any token iterable."""

    def __init__(self, tokens: Iterable[Token]):
        self._tokens = iter(tokens)
        self.current: Optional[Token] = None
        self.exhausted = False

    def try_advance(self) -> Optional[Token]:
        """Move to the next token; ``None`` once the underlying iterable has run out."""
        if self.exhausted:
            return None
        try:
            self.current = next(self._tokens)
        except StopIteration:
            self.exhausted = True
            self.current = None
        return self.current


class Parser:
    """
    Iterator over the top-level commands of a script.

    Loops are not expanded: a ``loop`` form comes out as one
    :class:`LoopCommand` whose body is parsed in full. Any error ends the
    iteration for good.
    """

    def __init__(self, tokens: Iterable[Token]):
        self.cursor = TokenCursor(tokens)
        self._finished = False
        self._commands: dict[str, Callable[[], Command]] = {
            "define": self.visit_define,
            "place": self.visit_place,
            "shift": self.visit_shift,
            "erase": self.visit_erase,
            "loop": self.visit_loop,
        }
        self._shapes: dict[str, Callable[[], Shape]] = {
            "circle": self.visit_circle,
            "line": self.visit_line,
        }

    def __iter__(self) -> Iterator[Command]:
        return self

    def __next__(self) -> Command:
        if self._finished:
            raise StopIteration
        try:
            token = self.cursor.try_advance()
            if token is None:
                raise UnexpectedEndOfInput("Expected '(' or end of source", None)
            if token.kind is TokenKind.END_OF_SOURCE:
                self._finished = True
                raise StopIteration
            if token.kind is not TokenKind.LEFT_PAREN:
                raise ScriptSyntaxError("Expected '('", token)
            return self.visit_command()
        except Exception:
            self._finished = True
            raise

    # ---- token helpers ---------------------------------------------------

    def _next_token(self, expectation: str) -> Token:
        token = self.cursor.try_advance()
        if token is None or token.kind is TokenKind.END_OF_SOURCE:
            raise UnexpectedEndOfInput(expectation, token)
        return token

    def _expect(self, kind: TokenKind, expectation: str) -> Token:
        token = self._next_token(expectation)
        if token.kind is not kind:
            raise ScriptSyntaxError(expectation, token)
        return token

    def _close(self) -> None:
        self._expect(TokenKind.RIGHT_PAREN, "Expected ')'")

    # ---- productions -----------------------------------------------------

    def _command_keyword(self) -> str:
        expectation = "Expected command keyword (define, place, shift, erase, loop)"
        token = self._next_token(expectation)
        if token.kind is not TokenKind.KEYWORD or token.text not in self._commands:
            raise ScriptSyntaxError(expectation, token)
        return token.text

    def visit_command(self) -> Command:
        return self._commands[self._command_keyword()]()

    def visit_name(self) -> str:
        token = self._expect(TokenKind.IDENTIFIER, "Expected identifier")
        name = token.text
        if not name:
            raise ScriptSyntaxError("Object name can not be empty", token)
        return name

    def visit_number(self) -> float:
        token = self._expect(TokenKind.NUMBER, "Expected number")
        try:
            return float(token.text)
        except ValueError as exc:
            raise ScriptSyntaxError("Expected a valid number", token) from exc

    def visit_count(self) -> int:
        token = self._expect(TokenKind.NUMBER, "Expected loop count")
        try:
            return int(token.text)
        except ValueError as exc:
            raise ScriptSyntaxError("Expected integer loop count", token) from exc

    def visit_vector2(self) -> Vector2:
        self._expect(TokenKind.LEFT_PAREN, "Expected '('")
        x = self.visit_number()
        y = self.visit_number()
        self._close()
        return Vector2(x, y)

    def visit_direction(self) -> Direction:
        expectation = "Expected direction (left, right, up, down)"
        token = self._next_token(expectation)
        direction = _DIRECTIONS.get(token.text) if token.kind is TokenKind.KEYWORD else None
        if direction is None:
            raise ScriptSyntaxError(expectation, token)
        return direction

    def visit_draw_list(self) -> AnimationObject:
        self._expect(TokenKind.LEFT_PAREN, "Expected '('")
        obj = AnimationObject()
        while True:
            token = self._next_token("Expected '(' or ')'")
            if token.kind is TokenKind.RIGHT_PAREN:
                return obj
            if token.kind is not TokenKind.LEFT_PAREN:
                raise ScriptSyntaxError("Expected '(' or ')'", token)
            obj.add_shape(self.visit_shape())

    def visit_shape(self) -> Shape:
        expectation = "Expected shape keyword (line, circle)"
        token = self._next_token(expectation)
        visit = self._shapes.get(token.text) if token.kind is TokenKind.KEYWORD else None
        if visit is None:
            raise ScriptSyntaxError(expectation, token)
        shape = visit()
        self._close()
        return shape

    def visit_circle(self) -> CircleShape:
        center = self.visit_vector2()
        return CircleShape(center, self.visit_number())

    def visit_line(self) -> LineShape:
        start = self.visit_vector2()
        return LineShape(start, self.visit_vector2())

    def visit_define(self) -> DefineCommand:
        name = self.visit_name()
        obj = self.visit_draw_list()
        self._close()
        return DefineCommand(name, obj)

    def visit_place(self) -> PlaceCommand:
        name = self.visit_name()
        position = self.visit_vector2()
        self._close()
        return PlaceCommand(name, position)

    def visit_shift(self) -> ShiftCommand:
        name = self.visit_name()
        direction = self.visit_direction()
        self._close()
        return ShiftCommand(name, direction)

    def visit_erase(self) -> EraseCommand:
        name = self.visit_name()
        self._close()
        return EraseCommand(name)

    def _open_loop(self) -> tuple[int, list[Command]]:
        count = self.visit_count()
        self._expect(TokenKind.LEFT_PAREN, "Expected '('")
        return count, []

    def visit_loop(self) -> LoopCommand:
        """
        Parse a loop and every loop nested in it.

        Nested loops are opened on an explicit stack of ``(count, body)``
        frames rather than by recursion, so nesting depth is bounded only by
        the source.
        """
        stack = [self._open_loop()]
        while True:
            token = self._next_token("Expected '(' or ')'")
            if token.kind is TokenKind.RIGHT_PAREN:
                self._close()
                count, body = stack.pop()
                loop = LoopCommand(count, tuple(body))
                if not stack:
                    return loop
                stack[-1][1].append(loop)
                continue
            if token.kind is not TokenKind.LEFT_PAREN:
                raise ScriptSyntaxError("Expected '(' or ')'", token)
            keyword = self._command_keyword()
            if keyword == "loop":
                stack.append(self._open_loop())
            else:
                stack[-1][1].append(self._commands[keyword]())


def parse(tokens: Iterable[Token]) -> Parser:
    """Return a lazy iterator of top-level commands parsed from ``tokens``."""
    return Parser(tokens)
