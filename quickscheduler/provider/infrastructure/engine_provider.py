"""
Engine provider.
Obtains the engine handle for a configuration from an engine factory.
"""

from __future__ import annotations

from quickscheduler.configuration.domain.scheduler_configuration import SchedulerConfiguration
from quickscheduler.engine.domain.engine_port import EnginePort
from quickscheduler.engine.infrastructure.engine_factory import EngineFactory, get_engine_factory
from quickscheduler.provider.domain.provider_name import DEFAULT_PROVIDER_NAME


class DefaultEngineProvider:
    """
    Provides the engine named after the configuration's job identity.

    The factory returns the same engine for the same instance name, so every
    call for one configuration reaches the same engine. The engine may not be
    started yet.
    """

    name = DEFAULT_PROVIDER_NAME

    def __init__(
        self,
        configuration: SchedulerConfiguration,
        factory: EngineFactory | None = None,
    ) -> None:
        """
        Initialize the provider.

        Args:
            configuration: Configuration naming the engine instance.
            factory: Engine factory to use. Defaults to the global factory.
        """
        self.configuration = configuration
        self.factory = factory or get_engine_factory()

    def provide(self) -> EnginePort:
        return self.factory.get_engine(self.configuration.engine_instance_name)

    def with_configuration(self, configuration: SchedulerConfiguration) -> DefaultEngineProvider:
        return DefaultEngineProvider(configuration, factory=self.factory)
