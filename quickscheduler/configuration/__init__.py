"""Scheduler configuration and identity naming."""

from quickscheduler.configuration.domain import SchedulerConfiguration

__all__ = ["SchedulerConfiguration"]
