"""
Settings lists.

Each setting is either ``key: value`` or a bare ``key``, similar to Python
function parameters. Settings are wrapped in square brackets:

    [default: 123]                           -> {"default": 123.0}
    [not null]                               -> {"not null": ABSENT}
    [some setting: 'value', primary key]     -> {"some setting": "value", "primary key": ABSENT}
    [delete: cascade, update: no action]     -> {"delete": Keyword("cascade"), "update": Keyword("no action")}
    [ref: > users.id]                        -> {"ref": [Relationship(kind=">", right_table="users", ...)]}

When a key repeats, the last value wins. Every ``ref:`` entry is collected
into one list under ``ref``, in written order. ``ref`` is matched in any
case, like the top-level ``Ref`` keyword.

A bare word value may contain spaces (``no action``) but ends before a word
that is itself followed by ``:`` or ``{``, so one-line Project bodies such
as ``database_type: PostgreSQL Note: 'x'`` split into two items.
"""

from __future__ import annotations

import re

from .. import ir
from ..combinators import Tagged, forward, lexeme, regex, seq, token
from .atoms import ATOM
from .base import ItemKind, comma_separated

# Starts and ends with a non-space; may contain spaces but not newlines
_WORD = r"[^,:\[\]{}\s](?:[^,:\[\]{}\n]*[^,:\[\]{}\s])?"

_PIECE = r"[^,:\[\]{}\s]+"
# Space-separated pieces, stopping before a piece that starts the next item
_VALUE_WORD = rf"{_PIECE}(?:[ \t]+(?!{_PIECE}[ \t]*[:{{]){_PIECE})*"

# `ref` followed by ':' (or written bare) is reserved for the ref setting
KEY = lexeme(regex(r"(?!(?i:ref)\s*[:,\]])" + _WORD, description="setting name"))
KEYWORD = lexeme(regex(_VALUE_WORD, description="keyword")).map(
    lambda name: ir.Keyword(name=name)
)
VALUE = ATOM | KEYWORD

# key  |  key: value
SETTING = seq(KEY, (token(":") >> VALUE).optional(ir.ABSENT)).map(tuple)


def _inline_ref(kind: ir.RelationshipKind, target: tuple[str, list[str]]) -> ir.Relationship:
    table, fields = target
    return ir.Relationship(kind=kind, right_table=table, right_fields=fields)


# kind and table.field(s); defined by the relationships module, which needs SETTINGS
REF_TARGET = forward()

# ref: > table.field  |  ref: - table.(a, b)
REF_SETTING = (
    lexeme(regex(re.compile(r"ref\s*:", re.IGNORECASE), description="'ref:'")) >> REF_TARGET
).combine(_inline_ref)


def fold_settings(items: list[Tagged]) -> dict[str, ir.SettingValue]:
    """Merge parsed entries into one mapping; ref entries accumulate under ``ref``."""
    settings: dict[str, ir.SettingValue] = {}
    refs: list[ir.Relationship] = []
    for item in items:
        if item.kind == ItemKind.REF:
            refs.append(item.value)
        else:
            key, value = item.value
            settings[key] = value
    if refs:
        settings["ref"] = refs
    return settings


SETTINGS = (
    token("[")
    >> comma_separated(REF_SETTING.tagged(ItemKind.REF) | SETTING.tagged(ItemKind.SETTING))
    << token("]")
).map(fold_settings)
