from __future__ import annotations

import enum
from dataclasses import dataclass, field, replace


class TokenKind(enum.Enum):
    LEFT_PAREN = "("
    RIGHT_PAREN = ")"
    KEYWORD = "keyword"
    IDENTIFIER = "identifier"
    NUMBER = "number"
    END_OF_SOURCE = "end of source"


KEYWORDS = frozenset(
    {
        "define",
        "place",
        "shift",
        "erase",
        "loop",
        "line",
        "circle",
        "left",
        "right",
        "up",
        "down",
    }
)


@dataclass(frozen=True)
class TokenPosition:
    """1-based line/column of a token's first character."""

    line: int = 1
    column: int = 1

    def __repr__(self) -> str:
        return f"{self.line}:{self.column}"


@dataclass(frozen=True, eq=False)
class Token:
    """
    A typed span into the source text.

    The text itself is not copied: ``text`` slices ``source`` on access, so a
    token costs the same no matter how long its lexeme is.
    """

    kind: TokenKind
    offset: int
    length: int
    position: TokenPosition
    source: str = field(repr=False)

    @property
    def text(self) -> str:
        return self.source[self.offset : self.offset + self.length]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Token):
            return NotImplemented
        return (
            self.kind is other.kind
            and self.position == other.position
            and self.text == other.text
        )

    def __hash__(self) -> int:
        return hash((self.kind, self.position, self.text))

    def __repr__(self) -> str:
        if self.kind is TokenKind.END_OF_SOURCE:
            return f"Token({self.kind.name} @ {self.position!r})"
        return f"Token({self.kind.name}, {self.text!r} @ {self.position!r})"


class TokenFactory:
    """
    Owns the lexer's cursor (source index + line/column) and stamps tokens.

    ``begin_token`` remembers where the current token starts; each token
    constructor consumes that start position, so every token must be opened
    with ``begin_token`` before it is produced.
    """

    def __init__(self, source: str):
        self.source = source
        self.index = 0
        self.position = TokenPosition()
        self._start: TokenPosition | None = None

    def move_next(self) -> None:
        self.position = TokenPosition(self.position.line, self.position.column + 1)
        self.index += 1

    def on_new_line(self) -> None:
        # Column 0 so the newline's own advance lands the next char on column 1.
        self.position = TokenPosition(self.position.line + 1, 0)

    def begin_token(self) -> None:
        self._start = self.position

    def end_token(self) -> None:
        self._start = None

    def _take_start(self) -> TokenPosition:
        if self._start is None:
            raise RuntimeError("begin_token() must be called before producing a token")
        start = self._start
        self.end_token()
        return start

    def _make(self, kind: TokenKind, length: int) -> Token:
        return Token(
            kind=kind,
            offset=self.index - length,
            length=length,
            position=self._take_start(),
            source=self.source,
        )

    def left_paren(self) -> Token:
        return self._make(TokenKind.LEFT_PAREN, 1)

    def right_paren(self) -> Token:
        return self._make(TokenKind.RIGHT_PAREN, 1)

    def end_of_source(self) -> Token:
        return self._make(TokenKind.END_OF_SOURCE, 0)

    def keyword(self, length: int) -> Token:
        return self._make(TokenKind.KEYWORD, length)

    def identifier(self, length: int) -> Token:
        return self._make(TokenKind.IDENTIFIER, length)

    def number(self, length: int) -> Token:
        return self._make(TokenKind.NUMBER, length)

    @staticmethod
    def widen_left(token: Token, count: int = 1) -> Token:
        """Extend a token's span ``count`` characters to the left (used for the sign of a number)."""
        return replace(token, offset=token.offset - count, length=token.length + count)
