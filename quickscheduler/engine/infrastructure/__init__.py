"""Infrastructure layer for the scheduling engine."""

from quickscheduler.engine.infrastructure.asyncio_engine import AsyncioEngine
from quickscheduler.engine.infrastructure.engine_factory import EngineFactory, get_engine_factory
from quickscheduler.engine.infrastructure.fire_schedule import (
    CronFireSchedule,
    FireSchedule,
    IntervalFireSchedule,
    build_fire_schedule,
)
from quickscheduler.engine.infrastructure.job_runner import execute_job

__all__ = [
    "AsyncioEngine",
    "EngineFactory",
    "get_engine_factory",
    "FireSchedule",
    "CronFireSchedule",
    "IntervalFireSchedule",
    "build_fire_schedule",
    "execute_job",
]
