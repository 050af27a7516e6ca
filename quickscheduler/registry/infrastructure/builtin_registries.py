"""
Built-in registries.
Registries pre-populated with the built-in providers of each family.
"""

from quickscheduler.configuration.domain.scheduler_configuration import SchedulerConfiguration
from quickscheduler.engine.domain.engine_port import EnginePort
from quickscheduler.engine.domain.job_descriptor import JobBody, JobDescriptor
from quickscheduler.engine.domain.trigger_descriptor import TriggerDescriptor
from quickscheduler.engine.infrastructure.engine_factory import EngineFactory
from quickscheduler.provider.infrastructure.engine_provider import DefaultEngineProvider
from quickscheduler.provider.infrastructure.job_detail_provider import (
    DefaultJobDetailProvider,
    log_job_value,
)
from quickscheduler.provider.infrastructure.trigger_providers import (
    CronTriggerProvider,
    IntervalTriggerProvider,
)
from quickscheduler.registry.domain.lookup_mode import LookupMode
from quickscheduler.registry.infrastructure.provider_registry import ProviderRegistry


def create_trigger_registry(
    configuration: SchedulerConfiguration,
    lookup_mode: LookupMode = LookupMode.LENIENT,
) -> ProviderRegistry[TriggerDescriptor]:
    """
    Create a registry holding the Cron and Interval trigger providers.
    Cron is registered first and is therefore the lenient fallback.
    """
    registry: ProviderRegistry[TriggerDescriptor] = ProviderRegistry(lookup_mode)
    registry.register(CronTriggerProvider(configuration))
    registry.register(IntervalTriggerProvider(configuration))
    return registry


def create_job_detail_registry(
    configuration: SchedulerConfiguration,
    body: JobBody = log_job_value,
    lookup_mode: LookupMode = LookupMode.LENIENT,
) -> ProviderRegistry[JobDescriptor]:
    """Create a registry holding the default job-detail provider."""
    registry: ProviderRegistry[JobDescriptor] = ProviderRegistry(lookup_mode)
    registry.register(DefaultJobDetailProvider(configuration, body=body))
    return registry


def create_engine_registry(
    configuration: SchedulerConfiguration,
    factory: EngineFactory | None = None,
    lookup_mode: LookupMode = LookupMode.LENIENT,
) -> ProviderRegistry[EnginePort]:
    """Create a registry holding the default engine provider."""
    registry: ProviderRegistry[EnginePort] = ProviderRegistry(lookup_mode)
    registry.register(DefaultEngineProvider(configuration, factory=factory))
    return registry
