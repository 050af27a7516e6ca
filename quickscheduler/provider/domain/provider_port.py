"""
Provider port definition.
A provider turns one configuration into one concrete resource.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Protocol, TypeVar, runtime_checkable

from quickscheduler.engine.domain.engine_port import EnginePort
from quickscheduler.engine.domain.job_descriptor import JobDescriptor
from quickscheduler.engine.domain.trigger_descriptor import TriggerDescriptor

if TYPE_CHECKING:
    from quickscheduler.configuration.domain.scheduler_configuration import (
        SchedulerConfiguration,
    )

T_co = TypeVar("T_co", covariant=True)


@runtime_checkable
class Provider(Protocol[T_co]):
    """
    Capability of producing one resource from a configuration.

    A provider closes over exactly one configuration and is stateless beyond
    it: every ``provide()`` call derives a fresh resource from that
    configuration. Providers are looked up in registries by ``name``.
    """

    @property
    def name(self) -> str:
        """Stable name the provider is registered under."""
        ...

    @property
    def configuration(self) -> SchedulerConfiguration:
        """Configuration the provider closes over."""
        ...

    def provide(self) -> T_co:
        """
        Produce the resource.

        Raises:
            SchedulingError: If the configuration is unusable for this provider.
        """
        ...

    def with_configuration(self, configuration: SchedulerConfiguration) -> Provider[T_co]:
        """Return the same provider variant bound to another configuration."""
        ...


TriggerProvider = Provider[TriggerDescriptor]
JobDetailProvider = Provider[JobDescriptor]
EngineProvider = Provider[EnginePort]
