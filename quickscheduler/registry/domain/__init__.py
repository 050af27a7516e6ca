"""Domain layer for provider registries."""

from quickscheduler.registry.domain.lookup_mode import LookupMode
from quickscheduler.registry.domain.registry_port import RegistryPort

__all__ = ["LookupMode", "RegistryPort"]
