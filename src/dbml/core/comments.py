"""
Comment removal for DBML source text.

Comments run from ``//`` to the end of the line. They are removed in one
pass before any structural parsing. Removing a comment never removes a
newline, so line numbers in the stripped text match the input.

In ``blind`` mode a ``//`` inside a string, quoted identifier or backtick
expression is treated as a comment too (``'http://example.com'`` loses
everything after ``http:``). ``aware`` mode skips over those literals.
"""

from __future__ import annotations

import re

from .config import CommentMode

_COMMENT_RE = re.compile(r"//.*$", re.MULTILINE)

# Literals come first so a // inside one is consumed as part of the literal
_LITERAL_OR_COMMENT_RE = re.compile(
    r"""
    (?P<literal>
        '''(?:[^']|'[^']|''[^'])*'''
      | '(?:[^'\\]|\\.)*'
      | `[^`]*`
      | "[^"]*"
    )
    | (?P<comment>//[^\n]*)
    """,
    re.VERBOSE | re.DOTALL,
)


def strip_comments(text: str, mode: CommentMode = CommentMode.BLIND) -> str:
    """Remove ``//`` comments from ``text`` according to ``mode``."""
    if mode == CommentMode.AWARE:
        return _LITERAL_OR_COMMENT_RE.sub(_keep_literal, text)
    return _COMMENT_RE.sub("", text)


def _keep_literal(match: re.Match[str]) -> str:
    literal = match.group("literal")
    return literal if literal is not None else ""
