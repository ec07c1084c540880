"""
animscript.lexing.lexer — character-level scanner.

The lexer is an explicit iterator: every call to ``next()`` scans just far
enough to produce one token, and the only state it keeps between calls is the
factory cursor. Tokens reference the caller's source string instead of
copying text out of it, so memory stays constant however long the source is.
"""

from __future__ import annotations

from typing import Iterator

from ..errors import LexError
from .tokens import KEYWORDS, Token, TokenFactory

__all__ = ["Lexer", "tokenize"]

_SKIPPED = " \t\r"


def _is_digit(ch: str) -> bool:
    return ch.isdecimal()


def _is_letter(ch: str) -> bool:
    return ch.isalpha()


class Lexer:
    """
    Single-pass token iterator over ``source``.

    The sequence always ends with one ``END_OF_SOURCE`` token, unless a
    :class:`LexError` is raised first; either way the lexer is exhausted
    afterwards.
    """

    def __init__(self, source: str):
        self.source = source
        self.factory = TokenFactory(source)
        self._finished = False

    @property
    def _current(self) -> str:
        index = self.factory.index
        return self.source[index] if index < len(self.source) else ""

    def __iter__(self) -> Iterator[Token]:
        return self

    def __next__(self) -> Token:
        if self._finished:
            raise StopIteration
        try:
            return self._scan()
        except LexError:
            self._finished = True
            raise

    def _scan(self) -> Token:
        factory = self.factory
        while factory.index < len(self.source):
            ch = self.source[factory.index]

            if ch == "\n":
                factory.on_new_line()
                factory.move_next()
                continue
            if ch in _SKIPPED:
                factory.move_next()
                continue

            factory.begin_token()
            if ch == "(":
                factory.move_next()
                return factory.left_paren()
            if ch == ")":
                factory.move_next()
                return factory.right_paren()
            if _is_letter(ch):
                return self._read_keyword_or_identifier()
            if _is_digit(ch):
                return self._read_number()
            if ch == "-":
                return self._read_signed_number()
            raise self._invalid(ch)

        factory.begin_token()
        self._finished = True
        return factory.end_of_source()

    def _invalid(self, ch: str) -> LexError:
        pos = self.factory.position
        return LexError(f"Invalid character '{ch}'", pos.line, pos.column)

    def _read_keyword_or_identifier(self) -> Token:
        factory = self.factory
        start = factory.index
        while True:
            ch = self._current
            if not ch or not (_is_letter(ch) or _is_digit(ch) or ch == "_"):
                break
            factory.move_next()

        length = factory.index - start
        if self.source[start : factory.index] in KEYWORDS:
            return factory.keyword(length)
        return factory.identifier(length)

    def _read_number(self) -> Token:
        factory = self.factory
        start = factory.index
        while True:
            ch = self._current
            if not ch or not (_is_digit(ch) or ch == "."):
                break
            factory.move_next()
        return factory.number(factory.index - start)

    def _read_signed_number(self) -> Token:
        # '-' is only valid as the sign of a number literal
        self.factory.move_next()
        ch = self._current
        if not ch:
            pos = self.factory.position
            raise LexError("Expected digit after '-' but reached end of input", pos.line, pos.column)
        if not _is_digit(ch):
            pos = self.factory.position
            raise LexError(f"Expected digit after '-' but got '{ch}'", pos.line, pos.column)
        return TokenFactory.widen_left(self._read_number())


def tokenize(source: str) -> Lexer:
    """Return a lazy token iterator over ``source``."""
    return Lexer(source)
