"""Scheduling engine boundary and its in-process implementation."""

from quickscheduler.engine.domain import (
    CronTriggerDescriptor,
    EnginePort,
    IntervalTriggerDescriptor,
    JobBody,
    JobDescriptor,
    JobKey,
    JobResult,
    JobStatus,
    TriggerDescriptor,
    TriggerKey,
)
from quickscheduler.engine.infrastructure import (
    AsyncioEngine,
    CronFireSchedule,
    EngineFactory,
    FireSchedule,
    IntervalFireSchedule,
    build_fire_schedule,
    execute_job,
    get_engine_factory,
)

__all__ = [
    # Domain
    "EnginePort",
    "JobBody",
    "JobDescriptor",
    "JobResult",
    "JobStatus",
    "JobKey",
    "TriggerKey",
    "TriggerDescriptor",
    "CronTriggerDescriptor",
    "IntervalTriggerDescriptor",
    # Infrastructure
    "AsyncioEngine",
    "EngineFactory",
    "get_engine_factory",
    "FireSchedule",
    "CronFireSchedule",
    "IntervalFireSchedule",
    "build_fire_schedule",
    "execute_job",
]
