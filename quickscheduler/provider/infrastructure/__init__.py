"""Infrastructure layer for providers."""

from quickscheduler.provider.infrastructure.engine_provider import DefaultEngineProvider
from quickscheduler.provider.infrastructure.job_detail_provider import (
    DefaultJobDetailProvider,
    log_job_value,
)
from quickscheduler.provider.infrastructure.trigger_providers import (
    CronTriggerProvider,
    IntervalTriggerProvider,
)

__all__ = [
    "CronTriggerProvider",
    "IntervalTriggerProvider",
    "DefaultJobDetailProvider",
    "DefaultEngineProvider",
    "log_job_value",
]
