"""
Provider registry interface.
Defines how providers of one family are registered and looked up by name.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Generic, TypeVar

from quickscheduler.provider.domain.provider_port import Provider
from quickscheduler.registry.domain.lookup_mode import LookupMode

if TYPE_CHECKING:
    from quickscheduler.configuration.domain.scheduler_configuration import (
        SchedulerConfiguration,
    )

T = TypeVar("T")


class RegistryPort(ABC, Generic[T]):
    """
    Interface for a provider registry.
    Maps provider names to the providers of one family.
    """

    @property
    @abstractmethod
    def lookup_mode(self) -> LookupMode:
        """Mode used by ``get``."""
        ...

    @abstractmethod
    def register(self, provider: Provider[T]) -> None:
        """
        Register a provider under its name.

        Args:
            provider: Provider to register.

        Raises:
            DuplicateProviderError: If the name is already registered.
        """
        ...

    @abstractmethod
    def get_exact(self, name: str | None) -> Provider[T]:
        """
        Get the provider registered under ``name``.

        Raises:
            ProviderNotRegisteredError: If no provider has that name.
        """
        ...

    @abstractmethod
    def get_or_default(self, name: str | None) -> Provider[T]:
        """
        Get the provider registered under ``name``, falling back to the first
        registered provider when the name is absent or unknown.

        Raises:
            ProviderNotRegisteredError: If the registry is empty.
        """
        ...

    @abstractmethod
    def get_all(self) -> dict[str, Provider[T]]:
        """
        Get all registered providers.

        Returns:
            Dictionary mapping names to providers, in registration order.
        """
        ...

    @abstractmethod
    def with_configuration(self, configuration: SchedulerConfiguration) -> RegistryPort[T]:
        """Return a new registry with every provider bound to ``configuration``."""
        ...

    def get(self, name: str | None) -> Provider[T]:
        """
        Look a provider up according to ``lookup_mode``.

        Args:
            name: Provider name. May be None.

        Returns:
            The matching provider; in LENIENT mode the first registered one
            when nothing matches.
        """
        if self.lookup_mode == LookupMode.STRICT:
            return self.get_exact(name)
        return self.get_or_default(name)
