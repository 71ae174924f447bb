"""
Error types for DBML parsing.

Every failure is fatal: the parser stops at the first position where no
grammar alternative matched and reports it through one of these types.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


class DbmlError(Exception):
    """Base exception for all DBML errors."""

    def __init__(self, message: str, context: ErrorContext | None = None):
        self.message = message
        self.context = context
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        """Format error message with context if available."""
        if self.context:
            return f"{self.context.format()}\n{self.message}"
        return self.message


class ParseError(DbmlError):
    """
    Raised when DBML text cannot be parsed.

    Attributes:
        offset: Character offset into the (comment-stripped) text
        expected: Descriptions of what the grammar would have accepted there
    """

    def __init__(
        self,
        message: str,
        offset: int = 0,
        expected: list[str] | None = None,
        context: ErrorContext | None = None,
    ):
        self.offset = offset
        self.expected = expected or []
        super().__init__(message, context)

    @property
    def line(self) -> int | None:
        return self.context.line if self.context else None

    @property
    def column(self) -> int | None:
        return self.context.column if self.context else None

    def locate(self, text: str, file: Path | None = None) -> ParseError:
        """Attach source context derived from ``offset`` into ``text``."""
        self.context = ErrorContext.from_offset(text, self.offset, file)
        self.args = (self._format_message(),)
        return self


class IndentationMismatchError(ParseError):
    """
    Raised when a line of a triple-quoted string is indented less than
    the string's first line.
    """

    pass


class TrailingInputError(ParseError):
    """Raised when input remains after the last complete top-level item."""

    pass


@dataclass
class ErrorContext:
    """
    Context information for an error, including source location.

    Attributes:
        file: Path to the source file, if the text came from one
        line: Line number (1-indexed)
        column: Column number (1-indexed)
        snippet: Optional source lines around the error location
    """

    file: Path | None
    line: int
    column: int
    snippet: str | None = None

    @classmethod
    def from_offset(cls, text: str, offset: int, file: Path | None = None) -> ErrorContext:
        """Build a context for a character offset, with two lines of snippet either side."""
        offset = max(0, min(offset, len(text)))
        line = text.count("\n", 0, offset) + 1
        line_start = text.rfind("\n", 0, offset) + 1
        column = offset - line_start + 1

        lines = text.split("\n")
        start = max(1, line - 2)
        end = min(len(lines), line + 2)
        snippet = "\n".join(lines[start - 1 : end])
        return cls(file=file, line=line, column=column, snippet=snippet)

    def format(self) -> str:
        """
        Format error context as a human-readable string.

        Returns:
            Formatted string like: "schema.dbml:10:5" (or "<string>:10:5")
        """
        name = str(self.file) if self.file else "<string>"
        location = f"{name}:{self.line}:{self.column}"

        if self.snippet:
            return f"{location}\n{self._format_snippet()}"
        return location

    def _format_snippet(self) -> str:
        """Format code snippet with line numbers and error marker."""
        if not self.snippet:
            return ""

        lines = self.snippet.split("\n")
        formatted = []

        # Snippet starts two lines before the error line
        start_line = max(1, self.line - 2)

        for i, line in enumerate(lines):
            line_num = start_line + i
            prefix = f"{line_num:4d} | "
            formatted.append(prefix + line)

            if line_num == self.line:
                marker_pos = len(prefix) + self.column - 1
                formatted.append(" " * marker_pos + "^^^")

        return "\n".join(formatted)


def make_parse_error(
    offset: int,
    expected: list[str],
    text: str | None = None,
    file: Path | None = None,
) -> ParseError:
    """
    Helper to create a ParseError for a syntax mismatch.

    Args:
        offset: Furthest position the grammar reached
        expected: What would have been accepted at that position
        text: Source text, used to derive line/column context
        file: Optional source file path

    Returns:
        ParseError with context attached when text is given
    """
    found = _describe_found(text, offset) if text is not None else "input"
    if expected:
        message = f"Expected {_join_expected(expected)}, got {found}"
    else:
        message = f"Unexpected {found}"
    error = ParseError(message, offset=offset, expected=sorted(expected))
    if text is not None:
        error.locate(text, file)
    return error


def _join_expected(expected: list[str]) -> str:
    items = sorted(set(expected))
    if len(items) == 1:
        return items[0]
    return "one of " + ", ".join(items)


def _describe_found(text: str, offset: int) -> str:
    if offset >= len(text):
        return "end of input"
    return repr(text[offset : offset + 10].split("\n")[0] or text[offset])
