"""
Parser configuration.

Options can be passed explicitly to ``parse`` or picked up from the
environment:

    DBML_COMMENT_MODE   blind (default) | aware

Usage:
    from dbml.core.config import CommentMode, ParserOptions

    options = ParserOptions(comment_mode=CommentMode.AWARE)
    project = parse(text, options=options)
"""

from __future__ import annotations

import logging
import os
from enum import StrEnum

from pydantic import BaseModel, ConfigDict

logger = logging.getLogger(__name__)

COMMENT_MODE_VAR = "DBML_COMMENT_MODE"


class CommentMode(StrEnum):
    """How ``//`` comments are removed before parsing."""

    BLIND = "blind"  # strip every // to end of line, even inside strings
    AWARE = "aware"  # leave // alone inside strings, identifiers and expressions


class ParserOptions(BaseModel):
    """Options controlling a single parse."""

    comment_mode: CommentMode = CommentMode.BLIND

    model_config = ConfigDict(frozen=True)

    @classmethod
    def from_env(cls) -> ParserOptions:
        """Build options from DBML_* environment variables.

        Unknown values fall back to the defaults with a warning.
        """
        return cls(comment_mode=get_comment_mode())


def get_comment_mode() -> CommentMode:
    """Get the comment mode from DBML_COMMENT_MODE.

    Examples:
        >>> import os
        >>> os.environ["DBML_COMMENT_MODE"] = "aware"
        >>> get_comment_mode()
        <CommentMode.AWARE: 'aware'>
    """
    value = os.environ.get(COMMENT_MODE_VAR, "").lower().strip()

    if value == "" or value == "blind":
        return CommentMode.BLIND
    elif value == "aware":
        return CommentMode.AWARE
    else:
        logger.warning(
            "Unknown %s value '%s'. Valid values: blind, aware. Defaulting to blind.",
            COMMENT_MODE_VAR,
            value,
        )
        return CommentMode.BLIND
