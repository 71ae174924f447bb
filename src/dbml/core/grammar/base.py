"""
Shared building blocks for the DBML grammar modules.
"""

from __future__ import annotations

from enum import StrEnum

from ..combinators import Parser, keyword, lexeme, token


class ItemKind(StrEnum):
    """Tags for values produced inside block bodies and at the top level."""

    NOTE = "note"
    COLUMN = "column"
    INDEXES = "indexes"
    SETTING = "setting"
    REF = "ref"
    PROJECT = "project"
    TABLE = "table"
    TABLE_GROUP = "table_group"
    ENUM = "enum"


def kw(word: str) -> Parser:
    """A case-insensitive keyword, preceded by optional whitespace."""
    return lexeme(keyword(word))


def long_or_short(parser: Parser) -> Parser:
    """``: value`` or ``{ value }``."""
    return (token(":") >> parser) | (token("{") >> parser << token("}"))


def block(body_item: Parser) -> Parser:
    """``{ item* }`` yielding the list of items."""
    return token("{") >> body_item.many() << token("}")


def comma_separated(parser: Parser) -> Parser:
    """One or more ``parser`` separated by commas."""
    return parser.sep_by(token(","), minimum=1)


def parenthesized(parser: Parser) -> Parser:
    return token("(") >> comma_separated(parser) << token(")")
