"""Domain layer for providers."""

from quickscheduler.provider.domain.provider_name import DEFAULT_PROVIDER_NAME, TriggerStrategyName
from quickscheduler.provider.domain.provider_port import (
    EngineProvider,
    JobDetailProvider,
    Provider,
    TriggerProvider,
)

__all__ = [
    "Provider",
    "TriggerProvider",
    "JobDetailProvider",
    "EngineProvider",
    "TriggerStrategyName",
    "DEFAULT_PROVIDER_NAME",
]
