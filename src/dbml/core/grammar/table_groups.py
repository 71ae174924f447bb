"""
Table groups collect related tables under one name.

    TableGroup tablegroup_name {
      table1
      table2
      table3
    }

Members are table names only; they are not checked against the tables.
"""

from __future__ import annotations

from .. import ir
from ..combinators import seq
from .atoms import IDENTIFIER
from .base import block, kw

TABLE_GROUP = seq(kw("TableGroup") >> IDENTIFIER, block(IDENTIFIER)).combine(
    lambda name, tables: ir.TableGroup(name=name, tables=tables)
)
