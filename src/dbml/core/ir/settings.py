"""
Setting values and relationships for DBML IR.

Settings are the bracketed modifier lists attached to columns, indexes,
enum choices and relationships:

    id integer [pk, default: 123, note: 'Number']
    user_id int [ref: > users.id]

They live in one module with ``Relationship`` because the two refer to each
other: a relationship carries settings, and the ``ref`` setting of a column
holds relationships.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Union

from pydantic import BaseModel, ConfigDict, Field


class Absent(BaseModel):
    """
    Value of a setting written as a bare key, e.g. ``[pk]``.

    Distinct from an explicit ``null`` value, which is stored as ``None``.
    """

    model_config = ConfigDict(frozen=True)

    def __repr__(self) -> str:
        return "ABSENT"


ABSENT = Absent()


class Keyword(BaseModel):
    """
    A bare word setting value, e.g. ``cascade`` in ``[delete: cascade]``.

    Kept apart from quoted strings so ``[update: no action]`` and
    ``[update: 'no action']`` stay distinguishable.
    """

    name: str

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return self.name


class Expression(BaseModel):
    """A backtick-delimited code fragment, e.g. `` `now()` ``."""

    text: str

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        return f"`{self.text}`"


class RelationshipKind(StrEnum):
    """Cardinality of a relationship, named by its DBML operator."""

    MANY_TO_ONE = ">"
    ONE_TO_MANY = "<"
    ONE_TO_ONE = "-"


class Relationship(BaseModel):
    """
    A reference between table columns.

    Tables are referenced by name only. The inline form (a ``ref`` column
    setting) leaves ``name``, ``left_table`` and ``left_fields`` empty; the
    enclosing table and column supply them.

    Attributes:
        name: Optional relationship name (``Ref name: ...``)
        left_table: Table on the left of the operator
        left_fields: Columns on the left, in written order
        kind: Cardinality operator
        right_table: Table on the right of the operator
        right_fields: Columns on the right, in written order
        settings: Relationship settings, e.g. ``delete``/``update`` actions
    """

    name: str | None = None
    left_table: str | None = None
    left_fields: list[str] = Field(default_factory=list)
    kind: RelationshipKind
    right_table: str
    right_fields: list[str] = Field(min_length=1)
    settings: dict[str, SettingValue] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)

    @property
    def is_inline(self) -> bool:
        """True when the left side comes from an enclosing column."""
        return self.left_table is None


SettingValue = Union[
    Absent,
    Keyword,
    Expression,
    bool,
    float,
    str,
    None,
    list[Relationship],
]

Settings = dict[str, SettingValue]

Relationship.model_rebuild()
