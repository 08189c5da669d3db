"""
Configuration models.

Provides Pydantic models for unitgraph settings sections with validation.
"""

from __future__ import annotations

from typing import Any, Literal

from pydantic import ConfigDict, field_validator

from .base import GraphBaseModel

LogLevel = Literal["debug", "info", "warning", "error"]


class ConfigBaseModel(GraphBaseModel):
    """Base model for config sections with relaxed strict mode for TOML loading."""

    model_config = ConfigDict(
        strict=False,  # Allow coercion from TOML types
        validate_assignment=True,
        extra="ignore",  # Ignore unknown fields in config files
        populate_by_name=True,
        revalidate_instances="never",
    )


class BuildConfig(ConfigBaseModel):
    """Build evaluation configuration section."""

    description: str = "units.toml"
    release: bool = False


class RepositoryConfig(ConfigBaseModel):
    """Local package repository configuration section."""

    path: str = ".unitgraph/repository.db"


class LoggingConfig(ConfigBaseModel):
    """Logging configuration section."""

    level: LogLevel = "warning"
    console: bool = False
    file: bool = True

    @field_validator("level", mode="before")
    @classmethod
    def normalize_level(cls, v: Any) -> Any:
        """Accept log levels in any case."""
        if isinstance(v, str):
            return v.lower()
        return v
