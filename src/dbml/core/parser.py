import logging
from pathlib import Path

from . import ir
from .combinators import whitespace
from .comments import strip_comments
from .config import ParserOptions
from .errors import ParseError, TrailingInputError, make_parse_error
from .grammar import DOCUMENT

logger = logging.getLogger(__name__)


def parse(
    text: str,
    *,
    file: Path | None = None,
    options: ParserOptions | None = None,
) -> ir.Project:
    """
    Parse a DBML document into a Project.

    Comments are removed first (see ``dbml.core.comments``), then the whole
    remaining text must match the document grammar.

    Args:
        text: DBML source
        file: Source file, used only in error messages
        options: Parser options; read from the environment when omitted

    Returns:
        The parsed Project

    Raises:
        ParseError: no grammar alternative matched at some position
        IndentationMismatchError: a triple-quoted string is badly indented
        TrailingInputError: input remains after the last complete declaration
    """
    if options is None:
        options = ParserOptions.from_env()

    source = strip_comments(text, options.comment_mode)

    try:
        result = DOCUMENT(source, 0)
    except ParseError as e:
        e.locate(source, file)
        raise

    end = whitespace(source, result.index).index
    if end < len(source):
        # The document rule always succeeds; anything left over is an error
        if result.furthest > end:
            raise make_parse_error(result.furthest, list(result.expected), source, file)
        expected = sorted(result.expected)
        error = TrailingInputError(
            "Unexpected input after the last complete declaration; expected "
            + (", ".join(expected) if expected else "end of input"),
            offset=end,
            expected=expected,
        )
        raise error.locate(source, file)

    project: ir.Project = result.value
    logger.debug(
        "Parsed %s: %d tables, %d relationships, %d enums, %d table groups",
        file or "<string>",
        len(project.tables),
        len(project.relationships),
        len(project.enums),
        len(project.table_groups),
    )
    return project


def parse_file(path: Path | str, *, options: ParserOptions | None = None) -> ir.Project:
    """
    Read a UTF-8 DBML file and parse it.

    Args:
        path: Path to the .dbml file
        options: Parser options; read from the environment when omitted

    Returns:
        The parsed Project
    """
    path = Path(path)
    text = path.read_text(encoding="utf-8")
    return parse(text, file=path, options=options)
