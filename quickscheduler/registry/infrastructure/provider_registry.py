"""
Provider registry implementation.
Stores the providers of one family by name.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, TypeVar

from quickscheduler.errors import DuplicateProviderError, ProviderNotRegisteredError
from quickscheduler.provider.domain.provider_port import Provider
from quickscheduler.registry.domain.lookup_mode import LookupMode
from quickscheduler.registry.domain.registry_port import RegistryPort

if TYPE_CHECKING:
    from quickscheduler.configuration.domain.scheduler_configuration import (
        SchedulerConfiguration,
    )

T = TypeVar("T")

logger = logging.getLogger(__name__)


class ProviderRegistry(RegistryPort[T]):
    """
    In-memory provider registry.

    Not synchronized: register every provider during a single-threaded
    bootstrap phase, before any lookup from other threads.

    Example:
        registry: ProviderRegistry[TriggerDescriptor] = ProviderRegistry()
        registry.register(CronTriggerProvider(configuration))
        registry.register(IntervalTriggerProvider(configuration))

        registry.get_exact("Interval")      # IntervalTriggerProvider
        registry.get_or_default("Missing")  # CronTriggerProvider (first registered)
    """

    def __init__(self, lookup_mode: LookupMode = LookupMode.LENIENT) -> None:
        """
        Initialize the registry.

        Args:
            lookup_mode: Behaviour of ``get`` for unknown names.
        """
        self._lookup_mode = lookup_mode
        self._providers: dict[str, Provider[T]] = {}

    @property
    def lookup_mode(self) -> LookupMode:
        return self._lookup_mode

    def register(self, provider: Provider[T]) -> None:
        if provider.name in self._providers:
            raise DuplicateProviderError(provider.name)

        self._providers[provider.name] = provider
        logger.debug(f"Registered provider '{provider.name}' ({type(provider).__name__})")

    def unregister(self, name: str) -> bool:
        """
        Unregister a provider.

        Args:
            name: Provider name to unregister.

        Returns:
            True if the provider was unregistered, False if not found.
        """
        if name not in self._providers:
            return False

        del self._providers[name]
        logger.debug(f"Unregistered provider '{name}'")
        return True

    def get_exact(self, name: str | None) -> Provider[T]:
        if name is None or name not in self._providers:
            raise ProviderNotRegisteredError(name, self.names())
        return self._providers[name]

    def get_or_default(self, name: str | None) -> Provider[T]:
        if name is not None and name in self._providers:
            return self._providers[name]

        if not self._providers:
            raise ProviderNotRegisteredError(name, [])

        fallback = next(iter(self._providers.values()))
        logger.warning(
            f"Provider '{name}' is not registered; falling back to '{fallback.name}'"
        )
        return fallback

    def get_all(self) -> dict[str, Provider[T]]:
        return self._providers.copy()

    def names(self) -> list[str]:
        """Get the registered names in registration order."""
        return list(self._providers)

    def with_configuration(self, configuration: SchedulerConfiguration) -> ProviderRegistry[T]:
        registry: ProviderRegistry[T] = ProviderRegistry(self._lookup_mode)
        for provider in self._providers.values():
            registry.register(provider.with_configuration(configuration))
        return registry

    def __contains__(self, name: object) -> bool:
        return name in self._providers

    def __len__(self) -> int:
        return len(self._providers)
