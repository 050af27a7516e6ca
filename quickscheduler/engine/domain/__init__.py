"""Domain layer for the scheduling engine boundary."""

from quickscheduler.engine.domain.engine_port import EnginePort
from quickscheduler.engine.domain.job_descriptor import JobBody, JobDescriptor
from quickscheduler.engine.domain.job_result import JobResult
from quickscheduler.engine.domain.job_status import JobStatus
from quickscheduler.engine.domain.keys import JobKey, TriggerKey
from quickscheduler.engine.domain.trigger_descriptor import (
    CronTriggerDescriptor,
    IntervalTriggerDescriptor,
    TriggerDescriptor,
)

__all__ = [
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
]
