"""
Project definition and the top-level document.

    Project project_name {
      database_type: 'PostgreSQL'
      Note: 'Description of the project'
    }

A document is any number of Project, Ref, Table, TableGroup and enum
declarations in any order. The document rule sorts them into one
``Project``: the first Project block supplies name, notes and settings,
and each other kind keeps its own source order.
"""

from __future__ import annotations

import logging

from .. import ir
from ..combinators import Tagged, alt, seq
from .atoms import IDENTIFIER, NOTE
from .base import ItemKind, block, kw
from .enums import ENUM
from .relationships import RELATIONSHIP
from .settings import SETTING
from .table_groups import TABLE_GROUP
from .tables import TABLE

logger = logging.getLogger(__name__)

PROJECT_ITEM = NOTE.tagged(ItemKind.NOTE) | SETTING.tagged(ItemKind.SETTING)


def _build_project_definition(name: str, items: list[Tagged]) -> ir.ProjectDef:
    notes: list[str] = []
    settings: dict[str, ir.SettingValue] = {}
    for item in items:
        if item.kind == ItemKind.NOTE:
            notes.append(item.value)
        elif item.kind == ItemKind.SETTING:
            key, value = item.value
            settings[key] = value
    return ir.ProjectDef(name=name, notes=notes, settings=settings)


PROJECT_DEFINITION = seq(kw("Project") >> IDENTIFIER, block(PROJECT_ITEM)).combine(
    _build_project_definition
)

DOCUMENT_ITEM = alt(
    PROJECT_DEFINITION.tagged(ItemKind.PROJECT),
    RELATIONSHIP.tagged(ItemKind.REF),
    TABLE.tagged(ItemKind.TABLE),
    TABLE_GROUP.tagged(ItemKind.TABLE_GROUP),
    ENUM.tagged(ItemKind.ENUM),
)


def assemble(items: list[Tagged]) -> ir.Project:
    """Fold top-level declarations into one ``Project``."""
    definition: ir.ProjectDef | None = None
    tables: list[ir.Table] = []
    relationships: list[ir.Relationship] = []
    enums: list[ir.Enum] = []
    table_groups: list[ir.TableGroup] = []

    for item in items:
        if item.kind == ItemKind.PROJECT:
            if definition is None:
                definition = item.value
            else:
                logger.warning(
                    "Ignoring Project '%s': project '%s' is already defined",
                    item.value.name,
                    definition.name,
                )
        elif item.kind == ItemKind.TABLE:
            tables.append(item.value)
        elif item.kind == ItemKind.REF:
            relationships.append(item.value)
        elif item.kind == ItemKind.ENUM:
            enums.append(item.value)
        elif item.kind == ItemKind.TABLE_GROUP:
            table_groups.append(item.value)

    if definition is None:
        return ir.Project(
            tables=tables, relationships=relationships, enums=enums, table_groups=table_groups
        )
    return ir.Project(
        name=definition.name,
        notes=definition.notes,
        settings=definition.settings,
        tables=tables,
        relationships=relationships,
        enums=enums,
        table_groups=table_groups,
    )


DOCUMENT = DOCUMENT_ITEM.many().map(assemble)
