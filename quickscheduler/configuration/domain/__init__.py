"""Domain layer for scheduler configuration."""

from quickscheduler.configuration.domain.scheduler_configuration import SchedulerConfiguration

__all__ = ["SchedulerConfiguration"]
