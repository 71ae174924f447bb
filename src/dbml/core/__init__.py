"""
Core DBML parsing: IR types, grammar, errors and the parse entry points.
"""

from . import ir
from .config import CommentMode, ParserOptions
from .errors import (
    DbmlError,
    ErrorContext,
    IndentationMismatchError,
    ParseError,
    TrailingInputError,
)
from .parser import parse, parse_file

__all__ = [
    "CommentMode",
    "DbmlError",
    "ErrorContext",
    "IndentationMismatchError",
    "ParseError",
    "ParserOptions",
    "TrailingInputError",
    "ir",
    "parse",
    "parse_file",
]
