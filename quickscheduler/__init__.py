"""
Configuration-driven scheduling facade.

Resolves a scheduler configuration into trigger, job and engine objects
through named provider registries, and drives an engine through the
schedule and reschedule lifecycle.
"""

from quickscheduler.configuration import SchedulerConfiguration
from quickscheduler.engine import (
    AsyncioEngine,
    CronTriggerDescriptor,
    EngineFactory,
    EnginePort,
    IntervalTriggerDescriptor,
    JobDescriptor,
    JobKey,
    JobResult,
    JobStatus,
    TriggerDescriptor,
    TriggerKey,
    get_engine_factory,
)
from quickscheduler.errors import (
    DuplicateProviderError,
    EngineError,
    InvalidFormatError,
    InvalidTriggerError,
    JobAlreadyExistsError,
    MissingValueError,
    ProviderNotRegisteredError,
    SchedulingError,
    TriggerAlreadyExistsError,
    TriggerNotFoundError,
)
from quickscheduler.logging_config import configure_logging
from quickscheduler.orchestrator import OrchestratorState, SchedulerManager, SchedulingOrchestrator
from quickscheduler.provider import (
    CronTriggerProvider,
    DefaultEngineProvider,
    DefaultJobDetailProvider,
    IntervalTriggerProvider,
    Provider,
    TriggerStrategyName,
)
from quickscheduler.registry import (
    LookupMode,
    ProviderRegistry,
    create_engine_registry,
    create_job_detail_registry,
    create_trigger_registry,
)

__all__ = [
    # Configuration
    "SchedulerConfiguration",
    # Engine
    "EnginePort",
    "AsyncioEngine",
    "EngineFactory",
    "get_engine_factory",
    "JobKey",
    "TriggerKey",
    "JobDescriptor",
    "JobResult",
    "JobStatus",
    "TriggerDescriptor",
    "CronTriggerDescriptor",
    "IntervalTriggerDescriptor",
    # Providers
    "Provider",
    "TriggerStrategyName",
    "CronTriggerProvider",
    "IntervalTriggerProvider",
    "DefaultJobDetailProvider",
    "DefaultEngineProvider",
    # Registries
    "LookupMode",
    "ProviderRegistry",
    "create_trigger_registry",
    "create_job_detail_registry",
    "create_engine_registry",
    # Orchestration
    "OrchestratorState",
    "SchedulingOrchestrator",
    "SchedulerManager",
    # Errors
    "SchedulingError",
    "MissingValueError",
    "InvalidFormatError",
    "ProviderNotRegisteredError",
    "DuplicateProviderError",
    "EngineError",
    "JobAlreadyExistsError",
    "TriggerAlreadyExistsError",
    "TriggerNotFoundError",
    "InvalidTriggerError",
    # Logging
    "configure_logging",
]
