"""Registry lookup modes."""

from enum import StrEnum, auto


class LookupMode(StrEnum):
    """How a registry answers a lookup for a name nobody registered.

    Attributes:
        LENIENT: Fall back to the first registered provider
        STRICT: Raise ProviderNotRegisteredError
    """

    LENIENT = auto()
    STRICT = auto()
