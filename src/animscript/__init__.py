__version__ = "0.1.0"

from .context import AnimationContext, AnimationHooks
from .errors import (
    AnimationScriptError,
    DuplicateNameError,
    LexError,
    ScriptSyntaxError,
    SemanticError,
    UndeclaredNameError,
    UnexpectedEndOfInput,
)
from .flatten import Flattener, flatten
from .interpreter import commands, execute_all, run_script
from .lexing import Lexer, Token, TokenKind, TokenPosition, tokenize
from .model import (
    AnimationObject,
    AtomicCommand,
    CircleShape,
    Command,
    DefineCommand,
    Direction,
    EraseCommand,
    LineShape,
    LoopCommand,
    PlaceCommand,
    Shape,
    ShapeType,
    ShiftCommand,
    Vector2,
)
from .parsing import Parser, parse

__all__ = [
    "AnimationContext",
    "AnimationHooks",
    "AnimationObject",
    "AnimationScriptError",
    "AtomicCommand",
    "CircleShape",
    "Command",
    "DefineCommand",
    "Direction",
    "DuplicateNameError",
    "EraseCommand",
    "Flattener",
    "LexError",
    "Lexer",
    "LineShape",
    "LoopCommand",
    "Parser",
    "PlaceCommand",
    "ScriptSyntaxError",
    "SemanticError",
    "Shape",
    "ShapeType",
    "ShiftCommand",
    "Token",
    "TokenKind",
    "TokenPosition",
    "UndeclaredNameError",
    "UnexpectedEndOfInput",
    "Vector2",
    "commands",
    "execute_all",
    "flatten",
    "parse",
    "run_script",
    "tokenize",
]
