"""
Relationships.

Three ways of writing a relationship produce the same ``Relationship``:

    Ref: posts.user_id > users.id                    short form
    Ref name_optional {                              block form
      posts.(a, b) - users.(a, b) [delete: cascade]
    }
    user_id int [ref: > users.id]                    inline, see settings

Operators: ``>`` many-to-one, ``<`` one-to-many, ``-`` one-to-one.

A naked field name ends at any operator, so ``a.b-c.d`` reads the same as
``a.b - c.d``. Field names containing ``-`` must be double-quoted:
``a."order-id" > b.id``.
"""

from __future__ import annotations

from .. import ir
from ..combinators import alt, lexeme, regex, seq, string, token
from .atoms import IDENTIFIER, QUOTED_IDENTIFIER
from .base import kw, long_or_short, parenthesized
from .settings import REF_TARGET, SETTINGS

RELATIONSHIP_KIND = lexeme(
    alt(string(">"), string("<"), string("-")).desc("relationship kind (>, <, -)")
).map(ir.RelationshipKind)

RELATIONSHIP_FIELD = lexeme(
    QUOTED_IDENTIFIER | regex(r"[^\s`'\"\[\]{}()<>,.:-]+", description="field name")
)

# table.field  |  table.(field1, field2)
RELATIONSHIP_FIELDS = parenthesized(RELATIONSHIP_FIELD) | RELATIONSHIP_FIELD.map(
    lambda field: [field]
)
RELATIONSHIP_PART = seq(IDENTIFIER << token("."), RELATIONSHIP_FIELDS).map(tuple)

REF_TARGET.define(seq(RELATIONSHIP_KIND, RELATIONSHIP_PART))

RELATIONSHIP_BODY = seq(RELATIONSHIP_PART, RELATIONSHIP_KIND, RELATIONSHIP_PART, SETTINGS.optional())


def _build_relationship(name: str | None, body: list) -> ir.Relationship:
    (left_table, left_fields), kind, (right_table, right_fields), settings = body
    return ir.Relationship(
        name=name,
        left_table=left_table,
        left_fields=left_fields,
        kind=kind,
        right_table=right_table,
        right_fields=right_fields,
        settings=settings or {},
    )


RELATIONSHIP = seq(kw("Ref") >> IDENTIFIER.optional(), long_or_short(RELATIONSHIP_BODY)).combine(
    _build_relationship
)
