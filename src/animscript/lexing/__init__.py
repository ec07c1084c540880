"""Tokenizer: source text -> lazy token stream."""

from .lexer import Lexer, tokenize
from .tokens import KEYWORDS, Token, TokenFactory, TokenKind, TokenPosition

__all__ = [
    "KEYWORDS",
    "Lexer",
    "Token",
    "TokenFactory",
    "TokenKind",
    "TokenPosition",
    "tokenize",
]
