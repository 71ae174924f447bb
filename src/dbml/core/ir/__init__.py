"""
DBML Intermediate Representation (IR) types.

Immutable pydantic models produced by the parser. All types are
re-exported from this package.
"""

from .enums import (
    Enum,
    EnumChoice,
)
from .project import (
    Project,
    ProjectDef,
    TableGroup,
)
from .settings import (
    ABSENT,
    Absent,
    Expression,
    Keyword,
    Relationship,
    RelationshipKind,
    Settings,
    SettingValue,
)
from .tables import (
    Column,
    Index,
    Table,
)

__all__ = [
    "ABSENT",
    "Absent",
    "Column",
    "Enum",
    "EnumChoice",
    "Expression",
    "Index",
    "Keyword",
    "Project",
    "ProjectDef",
    "Relationship",
    "RelationshipKind",
    "SettingValue",
    "Settings",
    "Table",
    "TableGroup",
]
