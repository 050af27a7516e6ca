"""
Fire schedules.
Turns trigger descriptors into the sequence of times at which they fire.
"""

from abc import ABC, abstractmethod
from collections.abc import Iterator
from datetime import datetime, timedelta

from croniter import croniter  # type: ignore[import-untyped]

from quickscheduler.engine.domain.trigger_descriptor import (
    CronTriggerDescriptor,
    IntervalTriggerDescriptor,
    TriggerDescriptor,
)
from quickscheduler.errors import InvalidTriggerError


class FireSchedule(ABC):
    """Computes the fire times of one trigger."""

    @abstractmethod
    def fire_times(self, start: datetime) -> Iterator[datetime]:
        """
        Yield fire times in ascending order.

        Args:
            start: Time the trigger was scheduled at.

        Yields:
            Successive fire times. A finite schedule stops yielding.
        """
        raise NotImplementedError


class CronFireSchedule(FireSchedule):
    """
    Fire times of a cron expression, seconds field first.

    Example:
        # Every day at 12:00
        CronFireSchedule("0 0 12 * * *")

        # Every 5 seconds
        CronFireSchedule("*/5 * * * * *")
    """

    def __init__(self, cron_expression: str, start_at: datetime | None = None) -> None:
        self.cron_expression = cron_expression
        self.start_at = start_at

        # Parse eagerly so syntax errors surface at schedule time
        croniter(cron_expression, second_at_beginning=True)

    def fire_times(self, start: datetime) -> Iterator[datetime]:
        base = max(start, self.start_at) if self.start_at else start
        cron = croniter(self.cron_expression, base, second_at_beginning=True)
        while True:
            yield cron.get_next(datetime)


class IntervalFireSchedule(FireSchedule):
    """
    Fire times of a flat periodic repeat.

    The first firing happens at ``start_at`` (or at schedule time when the
    trigger starts now), then every ``interval_seconds`` seconds for
    ``repeat_count`` more times, or forever when ``repeat_count`` is None.
    """

    def __init__(
        self,
        interval_seconds: int,
        start_at: datetime | None = None,
        repeat_count: int | None = None,
    ) -> None:
        if interval_seconds <= 0:
            raise InvalidTriggerError(
                f"Repeat interval must be greater than zero seconds (got {interval_seconds})"
            )
        if repeat_count is not None and repeat_count < 0:
            raise InvalidTriggerError(f"Repeat count must be non-negative (got {repeat_count})")

        self.interval = timedelta(seconds=interval_seconds)
        self.start_at = start_at
        self.repeat_count = repeat_count

    def fire_times(self, start: datetime) -> Iterator[datetime]:
        fire_time = self.start_at or start
        fired = 0
        while self.repeat_count is None or fired <= self.repeat_count:
            yield fire_time
            fired += 1
            fire_time += self.interval


def build_fire_schedule(trigger: TriggerDescriptor) -> FireSchedule:
    """
    Build the fire schedule for a trigger descriptor.

    Raises:
        InvalidTriggerError: If the trigger type is unsupported or its
            parameters can never fire.
        ValueError: croniter errors for malformed cron expressions,
            propagated unchanged.
    """
    if isinstance(trigger, CronTriggerDescriptor):
        return CronFireSchedule(trigger.cron_expression, start_at=trigger.start_at)
    if isinstance(trigger, IntervalTriggerDescriptor):
        start_at = None if trigger.start_now else trigger.start_at
        return IntervalFireSchedule(
            trigger.interval_seconds,
            start_at=start_at,
            repeat_count=trigger.repeat_count,
        )
    raise InvalidTriggerError(f"Unsupported trigger type: {type(trigger).__name__}")
