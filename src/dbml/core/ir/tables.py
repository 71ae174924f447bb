"""
Table, column and index types for DBML IR.

DBML Syntax:

    Table bookings as B {
      id integer [pk]
      country varchar
      Note: 'Bookings by country'

      indexes {
        (id, country) [unique]
        (`lower(country)`)
      }
    }
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .settings import Expression, Relationship, SettingValue


class Column(BaseModel):
    """
    A table column.

    Attributes:
        name: Column name
        type: Raw type token, e.g. ``varchar(255)`` or ``decimal(1,2)``
        settings: Column settings
    """

    name: str
    type: str
    settings: dict[str, SettingValue] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)

    @property
    def inline_refs(self) -> list[Relationship]:
        """Relationships declared with ``[ref: ...]`` on this column."""
        refs = self.settings.get("ref")
        return refs if isinstance(refs, list) else []


class Index(BaseModel):
    """An index over one or more fields or expressions."""

    fields: list[str | Expression] = Field(min_length=1)
    settings: dict[str, SettingValue] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)


class Table(BaseModel):
    """
    A table definition.

    Attributes:
        name: Table name
        alias: Optional short name (``Table users as U``)
        notes: Note strings in written order
        columns: Columns in written order
        indexes: Indexes from all ``indexes`` blocks, in written order
    """

    name: str
    alias: str | None = None
    notes: list[str] = Field(default_factory=list)
    columns: list[Column] = Field(default_factory=list)
    indexes: list[Index] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)

    def get_column(self, name: str) -> Column | None:
        """Get column by name."""
        for column in self.columns:
            if column.name == name:
                return column
        return None
