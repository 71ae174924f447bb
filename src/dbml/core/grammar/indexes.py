"""
Index definitions.

Indexes let users quickly locate and access data. They are declared in an
``indexes`` block inside a table:

    Table bookings {
      id integer
      country varchar
      booking_date date
      created_at timestamp

      indexes {
        (id, country) [pk]
        created_at [note: 'Date']
        booking_date
        (country, booking_date) [unique]
        booking_date [type: 'hash']
        (`id*2`)
        (`id*3`,`getdate()`)
        (`id*3`,id)
      }
    }

There are three kinds of index definition:

- single field: ``created_at``
- composite: ``(created_at, country)``
- expression: ``(`first_name || last_name`)``, which may be mixed with
  plain fields in a composite index

A single field and a one-element composite parse to the same field list.
"""

from __future__ import annotations

from .. import ir
from ..combinators import lexeme, regex, seq
from .atoms import EXPRESSION, QUOTED_IDENTIFIER
from .base import block, kw, parenthesized
from .settings import SETTINGS

INDEX_FIELD = lexeme(
    QUOTED_IDENTIFIER | regex(r"[^(){}\[\],`'\"\s]+", description="index field")
)
INDEX_COMPOSITE = parenthesized(lexeme(EXPRESSION) | INDEX_FIELD)

INDEX = seq(INDEX_COMPOSITE | INDEX_FIELD.map(lambda field: [field]), SETTINGS.optional()).combine(
    lambda fields, settings: ir.Index(fields=fields, settings=settings or {})
)

# indexes { index* }
INDEXES = kw("indexes") >> block(INDEX)
