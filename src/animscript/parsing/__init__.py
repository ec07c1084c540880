from .parser import Parser, TokenCursor, parse

__all__ = ["Parser", "TokenCursor", "parse"]
