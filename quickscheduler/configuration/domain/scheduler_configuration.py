"""
Scheduler configuration model.
Describes one schedule request and derives the identity names used by the
engine from it.
"""

from __future__ import annotations

import uuid
from typing import Any

import uuid6
from pydantic import BaseModel, ConfigDict, Field

from quickscheduler.engine.domain.keys import JobKey, TriggerKey


class SchedulerConfiguration(BaseModel):
    """
    Immutable description of one schedule request.

    Field syntax is not validated here; the provider that consumes a field
    validates it when it produces its resource. The job instance id is
    generated once per instance and threaded through every derived name, so
    repeated schedules of the same logical job stay unique.

    Example:
        configuration = SchedulerConfiguration(
            scheduler_name="Reports",
            trigger_strategy_name="Cron",
            trigger_value="0 0 12 ? * *",
            job_name="Default",
            job_value="daily-report",
        )

        # Same logical job, new cadence
        faster = configuration.derive(keep_identity=True, trigger_value="0 0 * ? * *")
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    scheduler_name: str = Field(
        description="Name of the engine provider, also prefixes every identity name",
        examples=["Default"],
    )
    trigger_strategy_name: str = Field(
        description="Name of the trigger provider to use",
        examples=["Cron", "Interval"],
    )
    trigger_value: str | None = Field(
        default=None,
        description="Strategy-specific payload: cron expression or integer seconds",
        examples=["0 0 12 ? * *", "5"],
    )
    job_name: str = Field(
        description="Name of the job-detail provider to use",
        examples=["Default"],
    )
    job_value: str | None = Field(
        default=None,
        description="Opaque payload forwarded to the job body",
    )
    job_instance_id: uuid.UUID = Field(
        default_factory=uuid6.uuid7,
        description="Process-unique identifier of this logical job",
    )

    @classmethod
    def default(cls) -> SchedulerConfiguration:
        """
        Canonical configuration for bootstrapping.
        Every call returns a configuration with a fresh job instance id.
        """
        return cls(
            scheduler_name="Default",
            trigger_strategy_name="Interval",
            trigger_value="1",
            job_name="Default",
            job_value="Test",
        )

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> SchedulerConfiguration:
        """Build a configuration from a plain mapping."""
        return cls.model_validate(data)

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary for serialization."""
        return self.model_dump(mode="json")

    def derive(self, *, keep_identity: bool = False, **changes: Any) -> SchedulerConfiguration:
        """
        Copy this configuration, applying ``changes``.

        Args:
            keep_identity: Keep the job instance id, so the copy names the same
                logical job (use this to reschedule it). Otherwise the copy gets
                a fresh id and names a new job.
            **changes: Field values to override.

        Returns:
            A new configuration.
        """
        if "job_instance_id" in changes:
            raise ValueError("job_instance_id cannot be overridden; use keep_identity")

        data = self.model_dump()
        data.update(changes)
        if not keep_identity:
            data.pop("job_instance_id")
        return type(self).model_validate(data)

    @property
    def group_name(self) -> str:
        return f"{self.scheduler_name}{self.job_instance_id}"

    @property
    def job_identity_name(self) -> str:
        return f"{self.scheduler_name}{self.job_instance_id}"

    @property
    def trigger_identity_name(self) -> str:
        return f"{self.scheduler_name}{self.trigger_strategy_name}"

    @property
    def engine_instance_name(self) -> str:
        """Name under which the engine factory creates or reuses an engine."""
        return self.group_name

    @property
    def job_key(self) -> JobKey:
        return JobKey(self.job_identity_name, self.group_name)

    @property
    def trigger_key(self) -> TriggerKey:
        return TriggerKey(self.trigger_identity_name, self.group_name)
