"""
Column and table definitions.

    Table table_name [as alias] {
      column_name column_type [column_settings]
      Note: 'table note'
      indexes { ... }
    }

- a column name is plain text or double-quoted (``"column name"``)
- the column type is any single word without spaces or braces, so
  ``JSON``, ``varchar(255)`` and ``decimal(1,2)`` all work
- body items may appear in any order; notes, columns and indexes each keep
  their written order

    address varchar(255) [unique, not null, note: 'to include unit number']
    id integer [ pk, unique, default: 123, note: 'Number' ]
"""

from __future__ import annotations

from .. import ir
from ..combinators import Tagged, lexeme, regex, seq
from .atoms import IDENTIFIER, NOTE
from .base import ItemKind, block, kw
from .indexes import INDEXES
from .settings import SETTINGS

COLUMN_TYPE = lexeme(regex(r"[^\s{}]+", description="column type"))

COLUMN = seq(IDENTIFIER, COLUMN_TYPE, SETTINGS.optional()).combine(
    lambda name, type_, settings: ir.Column(name=name, type=type_, settings=settings or {})
)

TABLE_NAME = seq(IDENTIFIER, (kw("as") >> IDENTIFIER).optional())

TABLE_ITEM = (
    INDEXES.tagged(ItemKind.INDEXES) | NOTE.tagged(ItemKind.NOTE) | COLUMN.tagged(ItemKind.COLUMN)
)


def _build_table(header: list, items: list[Tagged]) -> ir.Table:
    name, alias = header
    notes: list[str] = []
    columns: list[ir.Column] = []
    indexes: list[ir.Index] = []
    for item in items:
        if item.kind == ItemKind.NOTE:
            notes.append(item.value)
        elif item.kind == ItemKind.COLUMN:
            columns.append(item.value)
        elif item.kind == ItemKind.INDEXES:
            indexes.extend(item.value)
    return ir.Table(name=name, alias=alias, notes=notes, columns=columns, indexes=indexes)


TABLE = seq(kw("Table") >> TABLE_NAME, block(TABLE_ITEM)).combine(_build_table)
