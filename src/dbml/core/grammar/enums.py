"""
Enum definitions.

    enum job_status {
      created [note: 'Waiting to be processed']
      running
      done
      failure
    }
"""

from __future__ import annotations

from .. import ir
from ..combinators import seq
from .atoms import IDENTIFIER
from .base import block, kw
from .settings import SETTINGS

ENUM_CHOICE = seq(IDENTIFIER, SETTINGS.optional()).combine(
    lambda name, settings: ir.EnumChoice(name=name, settings=settings or {})
)

ENUM = seq(kw("enum") >> IDENTIFIER, block(ENUM_CHOICE)).combine(
    lambda name, choices: ir.Enum(name=name, choices=choices)
)
