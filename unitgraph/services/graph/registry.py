"""
Unit registry.

Holds every named unit of one build-description evaluation. A registry is
created per evaluation and passed to every graph service; nothing about
units is kept at module level.
"""

from __future__ import annotations

from collections.abc import Iterator
from typing import Any

from ...core.di import get_logger
from ...core.exceptions import DuplicateArtifactNameError, UnknownUnitError
from ...core.interfaces.logger import ILogger
from ...core.models.unit import Unit


class UnitRegistry:
    """Name-keyed store of units, in registration order."""

    def __init__(self, logger: ILogger | None = None) -> None:
        self._units: dict[str, Unit] = {}
        self._logger = logger or get_logger()

    def register(self, name: str, **attributes: Any) -> Unit:
        """
        Create a unit, or return the existing one for ``name``.

        Attributes passed for an existing unit update it; an artifact name
        is checked against every other unit first.

        Args:
            name: Unit identity
            **attributes: Unit fields (kind, source_roots, dependencies, ...)

        Returns:
            The registered unit

        Raises:
            DuplicateArtifactNameError: If ``artifact_name`` is already taken
        """
        artifact_name = attributes.pop("artifact_name", None)

        unit = self._units.get(name)
        if unit is None:
            if artifact_name is not None:
                self._check_available(artifact_name, name)
            unit = Unit(name=name, **attributes)
            self._units[name] = unit
            self._logger.debug("Registered unit %s (%s)", name, unit.kind.value)
        else:
            for key, value in attributes.items():
                setattr(unit, key, value)
            if attributes:
                self._logger.debug("Updated unit %s: %s", name, sorted(attributes))

        if artifact_name is not None:
            self.assign_artifact_name(unit, artifact_name)
        return unit

    def lookup(self, name: str, referenced_by: str | None = None) -> Unit:
        """
        Get a registered unit.

        Raises:
            UnknownUnitError: If no unit has that name
        """
        unit = self._units.get(name)
        if unit is None:
            raise UnknownUnitError(name, referenced_by=referenced_by)
        return unit

    def assign_artifact_name(self, unit: Unit, artifact_name: str) -> None:
        """
        Assign a unit's artifact name after registration.

        Raises:
            DuplicateArtifactNameError: If another unit resolves to the same name
        """
        self._check_available(artifact_name, unit.name)
        unit.artifact_name = artifact_name
        self._logger.debug("Unit %s publishes as %s", unit.name, artifact_name)

    def _check_available(self, artifact_name: str, claimant: str) -> None:
        owner = self.owner_of(artifact_name)
        if owner is not None and owner.name != claimant:
            raise DuplicateArtifactNameError(artifact_name, units=[owner.name, claimant])

    def owner_of(self, artifact_name: str) -> Unit | None:
        """Get the unit whose resolved artifact name is ``artifact_name``."""
        for unit in self._units.values():
            if unit.resolved_artifact_name == artifact_name:
                return unit
        return None

    def validate_artifact_names(self) -> None:
        """
        Check that no two units resolve to the same artifact name.

        Names can only collide through defaults (a unit called ``core`` next
        to a unit whose explicit artifact name is ``core``).

        Raises:
            DuplicateArtifactNameError: On the first collision found
        """
        claimed: dict[str, str] = {}
        for unit in self._units.values():
            artifact_name = unit.resolved_artifact_name
            if artifact_name in claimed:
                raise DuplicateArtifactNameError(
                    artifact_name, units=[claimed[artifact_name], unit.name]
                )
            claimed[artifact_name] = unit.name

    def __contains__(self, name: object) -> bool:
        return name in self._units

    def __iter__(self) -> Iterator[Unit]:
        return iter(list(self._units.values()))

    def __len__(self) -> int:
        return len(self._units)

    @property
    def names(self) -> list[str]:
        """Unit names in registration order."""
        return list(self._units)
