"""Named provider registries with strict or lenient lookup."""

from quickscheduler.registry.domain import LookupMode, RegistryPort
from quickscheduler.registry.infrastructure import (
    ProviderRegistry,
    create_engine_registry,
    create_job_detail_registry,
    create_trigger_registry,
)

__all__ = [
    # Domain
    "LookupMode",
    "RegistryPort",
    # Infrastructure
    "ProviderRegistry",
    "create_trigger_registry",
    "create_job_detail_registry",
    "create_engine_registry",
]
