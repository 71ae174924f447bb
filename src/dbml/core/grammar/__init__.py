"""
Declarative grammar for DBML.

Rules are module-level constants built once at import and shared by every
parse. Modules, leaves first:

- atoms: booleans, null, numbers, expressions, strings, identifiers, notes
- settings: ``[key, key: value, ref: > table.field]`` lists
- indexes: index definitions and ``indexes`` blocks
- tables: columns and tables
- enums, table_groups: enum and TableGroup blocks
- relationships: short and block ``Ref`` forms
- project: Project blocks and the top-level document
"""

from .atoms import ATOM, IDENTIFIER, NOTE, STRING
from .enums import ENUM, ENUM_CHOICE
from .indexes import INDEX, INDEXES
from .project import DOCUMENT, PROJECT_DEFINITION
from .relationships import RELATIONSHIP, RELATIONSHIP_KIND, RELATIONSHIP_PART
from .settings import SETTING, SETTINGS
from .table_groups import TABLE_GROUP
from .tables import COLUMN, TABLE, TABLE_NAME

__all__ = [
    "ATOM",
    "COLUMN",
    "DOCUMENT",
    "ENUM",
    "ENUM_CHOICE",
    "IDENTIFIER",
    "INDEX",
    "INDEXES",
    "NOTE",
    "PROJECT_DEFINITION",
    "RELATIONSHIP",
    "RELATIONSHIP_KIND",
    "RELATIONSHIP_PART",
    "SETTING",
    "SETTINGS",
    "STRING",
    "TABLE",
    "TABLE_GROUP",
    "TABLE_NAME",
]
