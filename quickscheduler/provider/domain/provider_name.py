"""Names of the built-in providers."""

from enum import StrEnum


class TriggerStrategyName(StrEnum):
    """Names of the built-in trigger providers."""

    CRON = "Cron"
    INTERVAL = "Interval"


DEFAULT_PROVIDER_NAME = "Default"
