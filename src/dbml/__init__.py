"""
dbml - parser for the DBML database markup language.

Turns DBML text into an immutable pydantic model of tables, columns,
indexes, enums, relationships and table groups.

Usage:
    from dbml import parse

    project = parse("Table users { id int [pk] }")
    project.tables[0].columns[0].settings  # {"pk": ABSENT}
"""

from __future__ import annotations

from ._version import get_version
from .core import ir
from .core.config import CommentMode, ParserOptions
from .core.errors import (
    DbmlError,
    IndentationMismatchError,
    ParseError,
    TrailingInputError,
)
from .core.parser import parse, parse_file

__version__ = get_version()

__all__ = [
    "__version__",
    "CommentMode",
    "DbmlError",
    "IndentationMismatchError",
    "ParseError",
    "ParserOptions",
    "TrailingInputError",
    "ir",
    "parse",
    "parse_file",
]
