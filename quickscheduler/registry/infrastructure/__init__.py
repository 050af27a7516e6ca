"""Infrastructure layer for provider registries."""

from quickscheduler.registry.infrastructure.builtin_registries import (
    create_engine_registry,
    create_job_detail_registry,
    create_trigger_registry,
)
from quickscheduler.registry.infrastructure.provider_registry import ProviderRegistry

__all__ = [
    "ProviderRegistry",
    "create_trigger_registry",
    "create_job_detail_registry",
    "create_engine_registry",
]
