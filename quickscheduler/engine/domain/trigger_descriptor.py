"""
Trigger descriptors.
Declarative descriptions of when a job should run, handed to an engine.
"""

from dataclasses import dataclass
from datetime import datetime

from quickscheduler.engine.domain.keys import TriggerKey


@dataclass(frozen=True)
class TriggerDescriptor:
    """
    Base trigger descriptor.

    Attributes:
        key: Identity of the trigger within the engine.
        start_at: Explicit first fire time. None defers to the engine default.
    """

    key: TriggerKey
    start_at: datetime | None = None


@dataclass(frozen=True)
class CronTriggerDescriptor(TriggerDescriptor):
    """
    A trigger firing on an absolute recurring schedule.

    The expression is carried verbatim and interpreted by the engine
    (seconds, minutes, hours, day-of-month, month, day-of-week, optional year).

    Example:
        # Every day at 12:00
        CronTriggerDescriptor(key, cron_expression="0 0 12 ? * *")
    """

    cron_expression: str = ""


@dataclass(frozen=True)
class IntervalTriggerDescriptor(TriggerDescriptor):
    """
    A trigger firing every ``interval_seconds`` seconds.

    Attributes:
        interval_seconds: Period between firings.
        start_now: Fire the first time as soon as the trigger is scheduled.
        repeat_count: Number of repeats after the first firing.
            None repeats indefinitely.
    """

    interval_seconds: int = 0
    start_now: bool = True
    repeat_count: int | None = None

    @property
    def repeats_forever(self) -> bool:
        return self.repeat_count is None
