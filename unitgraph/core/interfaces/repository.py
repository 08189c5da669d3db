"""
Package repository interface.

The package repository client is the consumer of package descriptors. The
core only hands descriptors over; where they end up is up to the
implementation.
"""

from abc import ABC, abstractmethod

from ..models.package import PackageDescriptor


class IPackageRepository(ABC):
    """Interface for storing and querying published packages."""

    @abstractmethod
    def store(self, descriptor: PackageDescriptor) -> bool:
        """
        Store a package descriptor.

        Args:
            descriptor: Descriptor to store, keyed by group, artifact name and version

        Returns:
            True if a new publication was created, False if one was replaced
        """
        pass

    @abstractmethod
    def get(self, artifact_name: str, version: str) -> PackageDescriptor | None:
        """
        Get a stored package.

        Args:
            artifact_name: Published artifact name
            version: Version string

        Returns:
            The descriptor, or None if not stored
        """
        pass

    @abstractmethod
    def list_packages(self) -> list[PackageDescriptor]:
        """List stored packages ordered by artifact name then version."""
        pass
