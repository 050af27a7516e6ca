"""Providers turning a scheduler configuration into triggers, jobs and engines."""

from quickscheduler.provider.domain import (
    DEFAULT_PROVIDER_NAME,
    EngineProvider,
    JobDetailProvider,
    Provider,
    TriggerProvider,
    TriggerStrategyName,
)
from quickscheduler.provider.infrastructure import (
    CronTriggerProvider,
    DefaultEngineProvider,
    DefaultJobDetailProvider,
    IntervalTriggerProvider,
    log_job_value,
)

__all__ = [
    # Domain
    "Provider",
    "TriggerProvider",
    "JobDetailProvider",
    "EngineProvider",
    "TriggerStrategyName",
    "DEFAULT_PROVIDER_NAME",
    # Infrastructure
    "CronTriggerProvider",
    "IntervalTriggerProvider",
    "DefaultJobDetailProvider",
    "DefaultEngineProvider",
    "log_job_value",
]
