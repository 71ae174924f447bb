"""
Enum types for DBML IR.

DBML Syntax:

    enum job_status {
      created [note: 'Waiting to be processed']
      running
      done
    }
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field

from .settings import SettingValue


class EnumChoice(BaseModel):
    """A single value within an enum."""

    name: str
    settings: dict[str, SettingValue] = Field(default_factory=dict)

    model_config = ConfigDict(frozen=True)


class Enum(BaseModel):
    """An enum definition with its choices in written order."""

    name: str
    choices: list[EnumChoice] = Field(default_factory=list)

    model_config = ConfigDict(frozen=True)
