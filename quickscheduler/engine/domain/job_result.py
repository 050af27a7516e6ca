"""Job execution result model."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import Any

from quickscheduler.engine.domain.job_status import JobStatus
from quickscheduler.engine.domain.keys import JobKey


@dataclass
class JobResult:
    """Represents the result of one job body invocation.

    The engine logs and discards these values; only the latest one per job
    is kept for inspection. A failed result never stops later firings.

    Attributes:
        job_key: Key of the executed job
        fire_time: Scheduled fire time that caused the execution
        status: Execution status (SUCCESS or FAILED)
        execution_time: Time taken to execute in seconds
        value: Value returned by the job body (None if failed)
        error_message: Error message if the job failed (None if successful)
        error_type: Type of error that occurred (None if successful)
    """

    job_key: JobKey
    fire_time: datetime
    status: JobStatus
    execution_time: float = 0.0
    value: Any = None
    error_message: str | None = None
    error_type: str | None = None

    def __post_init__(self) -> None:
        """Validate the job result."""
        if self.execution_time < 0:
            raise ValueError("execution_time must be non-negative")

    def to_dict(self) -> dict[str, Any]:
        """Convert to dictionary representation.

        Returns:
            Dictionary containing all result information
        """
        return {
            "job_key": str(self.job_key),
            "fire_time": self.fire_time.isoformat(),
            "status": self.status.name,
            "execution_time": self.execution_time,
            "error_message": self.error_message,
            "error_type": self.error_type,
        }

    @classmethod
    def success(
        cls,
        job_key: JobKey,
        fire_time: datetime,
        execution_time: float,
        value: Any = None,
    ) -> JobResult:
        """Create a successful job result.

        Args:
            job_key: Job key
            fire_time: Fire time of the execution
            execution_time: Execution time in seconds
            value: Value returned by the job body

        Returns:
            JobResult with SUCCESS status
        """
        return cls(
            job_key=job_key,
            fire_time=fire_time,
            status=JobStatus.SUCCESS,
            execution_time=execution_time,
            value=value,
        )

    @classmethod
    def failure(
        cls,
        job_key: JobKey,
        fire_time: datetime,
        execution_time: float,
        error: Exception,
    ) -> JobResult:
        """Create a failed job result.

        Args:
            job_key: Job key
            fire_time: Fire time of the execution
            execution_time: Execution time in seconds
            error: Exception raised by the job body

        Returns:
            JobResult with FAILED status
        """
        return cls(
            job_key=job_key,
            fire_time=fire_time,
            status=JobStatus.FAILED,
            execution_time=execution_time,
            error_message=str(error),
            error_type=type(error).__name__,
        )
