"""
Base Pydantic models for unitgraph.

Provides common configuration and base classes for all unitgraph models.
"""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict


class GraphBaseModel(BaseModel):
    """Base model for all unitgraph Pydantic models.

    Configuration:
        - strict: Strict type coercion (no implicit conversions)
        - validate_assignment: Validate on attribute assignment
        - extra: Reject unknown fields
        - populate_by_name: Allow field aliases
        - revalidate_instances: Trust model instances (performance)

    Enums are kept as enum members (not serialized to values) so that
    graph code can compare against ``Channel.INTERFACE`` and friends.
    """

    model_config = ConfigDict(
        strict=True,
        validate_assignment=True,
        extra="forbid",
        populate_by_name=True,
        revalidate_instances="never",
    )


class ImmutableModel(GraphBaseModel):
    """Immutable base model for records that should not change after creation."""

    model_config = ConfigDict(
        frozen=True,
        strict=True,
        extra="forbid",
        populate_by_name=True,
        revalidate_instances="never",
    )
