"""
Atoms, identifiers and notes.

Atoms are tried in a fixed order: boolean, null, number, expression,
single-quoted string, triple-quoted string.

    true          -> True
    null          -> None
    123.45678     -> 123.45678
    `now()`       -> Expression(text="now()")
    'string'      -> "string"
    '''long
    string'''     -> "long\\nstring"
"""

from __future__ import annotations

import re

from .. import ir
from ..combinators import Parser, Result, alt, lexeme, regex
from ..errors import IndentationMismatchError
from .base import kw, long_or_short

BOOLEAN = regex(r"(?:true|false)\b", description="boolean").map(lambda word: word == "true")
NULL = regex(r"null\b", description="null").result(None)
NUMBER = regex(
    r"[-+]?\d+(?:\.\d+)?(?:[eE][-+]?\d+)?(?![\w.])", description="number"
).map(float)
EXPRESSION = regex(r"`([^`]+)`", group=1, description="expression").map(
    lambda text: ir.Expression(text=text)
)

# A lone '' is an empty string, but ''' always opens a triple-quoted string
SINGLE_LINE_STRING = regex(r"'(?!'')((?:[^'\\]|\\.)*)'", group=1, description="string").map(
    lambda text: text.replace("\\'", "'")
)

_MULTI_LINE_RE = re.compile(r"'''((?:[^']|'[^']|''[^'])*)'''")
_INDENT_RE = re.compile(r"[ \t]*")


def _multi_line_string(text: str, index: int) -> Result:
    match = _MULTI_LINE_RE.match(text, index)
    if not match:
        return Result.failure(index, "string")
    return Result.success(match.end(), dedent(match.group(1), match.start(1)))


def dedent(content: str, offset: int = 0) -> str:
    """
    Strip the first line's indentation from every line of ``content``.

    ``'''  long\\n    string'''`` becomes ``"long\\n  string"``.

    Raises:
        IndentationMismatchError: a line is indented less than the first one
    """
    lines = content.splitlines(keepends=True)
    if not lines:
        return content

    indent = _INDENT_RE.match(lines[0]).end()
    stripped = []
    position = offset
    for line in lines:
        if _INDENT_RE.match(line).end() < indent:
            raise IndentationMismatchError(
                f"Indentation does not match: expected at least {indent} leading "
                "whitespace characters in multi-line string",
                offset=position,
            )
        stripped.append(line[indent:])
        position += len(line)
    return "".join(stripped)


MULTI_LINE_STRING = Parser(_multi_line_string)

STRING = lexeme(SINGLE_LINE_STRING | MULTI_LINE_STRING)
ATOM = lexeme(alt(BOOLEAN, NULL, NUMBER, EXPRESSION, SINGLE_LINE_STRING, MULTI_LINE_STRING))

QUOTED_IDENTIFIER = regex(r'"([^"]+)"', group=1, description="identifier")
NAKED_IDENTIFIER = regex(r"[^\s`'\"\[\]{}()<>,.:]+", description="identifier")
IDENTIFIER = lexeme(QUOTED_IDENTIFIER | NAKED_IDENTIFIER)

# Note: 'short form'  |  Note { 'block form' }
NOTE = kw("Note") >> long_or_short(STRING)
