"""
Process-wide service container.

Maps interface types to dependency-injector providers. Only process
services are registered here (presenter, logger); graph state belongs to
each evaluation.
"""

from collections.abc import Callable
from typing import Optional, TypeVar

from dependency_injector import providers

T = TypeVar("T")


class ServiceContainer:
    """Interface-keyed provider table shared by the CLI and services."""

    _instance: Optional["ServiceContainer"] = None

    def __init__(self) -> None:
        self._providers: dict[type, providers.Provider] = {}

    @classmethod
    def get_instance(cls) -> "ServiceContainer":
        if cls._instance is None:
            cls._instance = cls()
        return cls._instance

    @classmethod
    def reset(cls) -> None:
        """Drop the global container; the next lookup starts empty."""
        cls._instance = None

    def register_singleton(
        self,
        interface: type[T],
        implementation: T | None = None,
        factory: Callable[[], T] | None = None,
    ) -> None:
        """
        Register one shared instance for ``interface``.

        A ready ``implementation`` is served as is; a ``factory`` runs on
        the first lookup only, so a logger configured from settings is not
        built until a service asks for it.
        """
        if implementation is not None:
            provider: providers.Provider = providers.Object(implementation)
        elif factory is not None:
            provider = providers.Singleton(factory)
        else:
            raise ValueError("Must provide either implementation or factory")
        self._providers[interface] = provider

    def try_resolve(self, interface: type[T]) -> T | None:
        """The registered service, or None if ``interface`` has no provider."""
        provider = self._providers.get(interface)
        return provider() if provider is not None else None


def get_container() -> ServiceContainer:
    """Get the global service container instance."""
    return ServiceContainer.get_instance()
