"""
Project-level types for DBML IR.

``Project`` is the root of a parsed document. ``ProjectDef`` is the
``Project name { ... }`` block itself, which the parser folds into the
``Project`` and does not keep.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .enums import Enum
from .settings import Relationship, SettingValue
from .tables import Table


class TableGroup(BaseModel):
    """A named group of table names. Members are not resolved against tables."""

    name: str
    tables: list[str] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)


class ProjectDef(BaseModel):
    """The ``Project`` block: name, notes and settings."""

    name: str
    notes: list[str] = Field(default_factory=list)
    settings: dict[str, SettingValue] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)


class Project(BaseModel):
    """
    A parsed DBML document.

    Attributes:
        name: Name from the Project block, None when there is none
        notes: Notes from the Project block
        settings: Settings from the Project block, e.g. ``database_type``
        tables: Tables in source order
        relationships: Top-level ``Ref`` declarations in source order
        enums: Enums in source order
        table_groups: Table groups in source order
    """

    name: str | None = None
    notes: list[str] = Field(default_factory=list)
    settings: dict[str, SettingValue] = Field(default_factory=dict)
    tables: list[Table] = Field(default_factory=list)
    relationships: list[Relationship] = Field(default_factory=list)
    enums: list[Enum] = Field(default_factory=list)
    table_groups: list[TableGroup] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    def get_table(self, name: str) -> Table | None:
        """Get table by name or alias."""
        for table in self.tables:
            if table.name == name or table.alias == name:
                return table
        return None

    def get_enum(self, name: str) -> Enum | None:
        """Get enum by name."""
        for enum in self.enums:
            if enum.name == name:
                return enum
        return None

    def get_table_group(self, name: str) -> TableGroup | None:
        """Get table group by name."""
        for group in self.table_groups:
            if group.name == name:
                return group
        return None
