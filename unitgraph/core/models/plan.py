"""
Task plan models.

Actions are what the host task runner schedules: compile a unit, pack an
archive, or one of the umbrella actions that aggregate them.
"""

from __future__ import annotations

from enum import Enum

from pydantic import Field

from .base import ImmutableModel

# Umbrella actions
BINARIES_ACTION = "jar"
FULL_BUILD_ACTION = "build"


class ActionKind(str, Enum):
    """What an action produces."""

    CLASSES = "classes"
    BINARY = "binary"
    SOURCES = "sources"
    DOCUMENTATION = "documentation"
    UMBRELLA = "umbrella"


class Action(ImmutableModel):
    """A named, schedulable action with declared prerequisites."""

    name: str = Field(min_length=1)
    kind: ActionKind
    unit: str | None = Field(default=None, description="Unit the action belongs to")
    prerequisites: list[str] = Field(default_factory=list, description="Actions run first")
    output: str | None = Field(default=None, description="Produced directory or archive")
    inputs: list[str] = Field(default_factory=list, description="Directories consumed")
    includes: list[str] = Field(default_factory=list, description="Include patterns")
