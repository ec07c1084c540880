"""Exception taxonomy for the animation script pipeline."""

from __future__ import annotations

from typing import TYPE_CHECKING, Optional

if TYPE_CHECKING:
    from .lexing.tokens import Token

__all__ = [
    "AnimationScriptError",
    "DuplicateNameError",
    "LexError",
    "ScriptSyntaxError",
    "SemanticError",
    "UndeclaredNameError",
    "UnexpectedEndOfInput",
]


class AnimationScriptError(Exception):
    """Base class for every error raised while tokenizing, parsing or executing a script."""


class LexError(AnimationScriptError):
    """Raised when the lexer meets a character that cannot start or continue a token.

    Attributes
    ----------
    line, column : int
        1-based position of the offending character.
    """

    def __init__(self, message: str, line: int, column: int) -> None:
        super().__init__(f"{message} at line {line}, column {column}")
        self.line = line
        self.column = column


class ScriptSyntaxError(AnimationScriptError):
    """Raised when the token stream does not match the grammar."""

    def __init__(self, expectation: str, token: Optional[Token]) -> None:
        self.expectation = expectation
        self.token = token
        super().__init__(self._format())

    def _format(self) -> str:
        tok = self.token
        if tok is None:
            return f"{self.expectation}, but got: none"
        return (
            f"{self.expectation}, but got: {tok.kind.name} '{tok.text}' "
            f"at line {tok.position.line}, column {tok.position.column}"
        )


class UnexpectedEndOfInput(ScriptSyntaxError):
    """A token was required but the input had already ended."""

    def _format(self) -> str:
        tok = self.token
        if tok is None:
            return f"Unexpected end of input: {self.expectation}"
        return (
            f"Unexpected end of input: {self.expectation} "
            f"(line {tok.position.line}, column {tok.position.column})"
        )


class SemanticError(AnimationScriptError):
    """Raised by an animation context when a command violates the name table."""

    def __init__(self, message: str, name: str) -> None:
        super().__init__(message)
        self.name = name


class DuplicateNameError(SemanticError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Object '{name}' is already declared", name)


class UndeclaredNameError(SemanticError):
    def __init__(self, name: str) -> None:
        super().__init__(f"Object '{name}' is not declared", name)
