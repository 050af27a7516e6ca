"""
Trigger providers.
Build cron and interval trigger descriptors from a configuration.
"""

from __future__ import annotations

import re

from quickscheduler.configuration.domain.scheduler_configuration import SchedulerConfiguration
from quickscheduler.engine.domain.trigger_descriptor import (
    CronTriggerDescriptor,
    IntervalTriggerDescriptor,
)
from quickscheduler.errors import InvalidFormatError, MissingValueError
from quickscheduler.provider.domain.provider_name import TriggerStrategyName

_NON_NEGATIVE_INTEGER = re.compile(r"\s*\+?[0-9]+\s*")


def _require_value(configuration: SchedulerConfiguration, strategy: str, expected: str) -> str:
    """Return the trigger value, treating None and blank strings as missing."""
    value = configuration.trigger_value
    if value is None or not value.strip():
        raise MissingValueError(strategy, expected)
    return value


class CronTriggerProvider:
    """
    Provides a trigger firing on the cron expression held in the trigger value.

    The expression is passed to the engine verbatim; its syntax is checked by
    the engine when the trigger is scheduled.

    Example:
        # Seconds Minutes Hours DayOfMonth Month DayOfWeek [Year]
        # "0 0 12 ? * *" fires every day at 12:00
        configuration = SchedulerConfiguration.default().derive(
            trigger_strategy_name="Cron", trigger_value="0 0 12 ? * *"
        )
        trigger = CronTriggerProvider(configuration).provide()
    """

    name = TriggerStrategyName.CRON.value

    def __init__(self, configuration: SchedulerConfiguration) -> None:
        self.configuration = configuration

    def provide(self) -> CronTriggerDescriptor:
        expected = 'a cron expression (ex. "0 0 12 ? * *")'
        expression = _require_value(self.configuration, self.name, expected)
        return CronTriggerDescriptor(
            key=self.configuration.trigger_key,
            cron_expression=expression,
        )

    def with_configuration(self, configuration: SchedulerConfiguration) -> CronTriggerProvider:
        return CronTriggerProvider(configuration)


class IntervalTriggerProvider:
    """
    Provides a trigger starting now and repeating forever every N seconds,
    where N is the trigger value.
    """

    name = TriggerStrategyName.INTERVAL.value

    def __init__(self, configuration: SchedulerConfiguration) -> None:
        self.configuration = configuration

    def provide(self) -> IntervalTriggerDescriptor:
        expected = "a non-negative integer (ex. 5)"
        value = _require_value(self.configuration, self.name, expected)
        if not _NON_NEGATIVE_INTEGER.fullmatch(value):
            raise InvalidFormatError(self.name, value, expected)

        return IntervalTriggerDescriptor(
            key=self.configuration.trigger_key,
            interval_seconds=int(value),
            start_now=True,
            repeat_count=None,
        )

    def with_configuration(self, configuration: SchedulerConfiguration) -> IntervalTriggerProvider:
        return IntervalTriggerProvider(configuration)
