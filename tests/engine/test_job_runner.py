"""Tests for job body execution."""

import logging
from datetime import datetime

import pytest

from quickscheduler.configuration import SchedulerConfiguration
from quickscheduler.engine import JobDescriptor, JobStatus, execute_job

FIRE_TIME = datetime(2024, 1, 1, 12, 0, 0)


def make_job(configuration: SchedulerConfiguration, body: object) -> JobDescriptor:
    return JobDescriptor(
        key=configuration.job_key, body=body, payload=configuration  # type: ignore[arg-type]
    )


@pytest.mark.asyncio
class TestExecuteJob:
    """Test cases for execute_job."""

    async def test_sync_body_success(self, configuration: SchedulerConfiguration) -> None:
        """Test that a sync body receives the payload and its value is kept."""
        job = make_job(configuration, lambda payload: payload.job_value)

        result = await execute_job(job, FIRE_TIME)

        assert result.status == JobStatus.SUCCESS
        assert result.status.is_successful()
        assert result.value == "Test"
        assert result.job_key == configuration.job_key
        assert result.fire_time == FIRE_TIME
        assert result.execution_time >= 0

    async def test_async_body_success(self, configuration: SchedulerConfiguration) -> None:
        """Test that an async body is awaited."""

        async def body(payload: SchedulerConfiguration) -> str:
            return f"async:{payload.job_value}"

        result = await execute_job(make_job(configuration, body), FIRE_TIME)

        assert result.value == "async:Test"

    async def test_failure_is_captured(
        self, configuration: SchedulerConfiguration, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test that a raising body yields a failed result instead of an exception."""

        def body(payload: SchedulerConfiguration) -> None:
            raise RuntimeError("boom")

        with caplog.at_level(logging.ERROR):
            result = await execute_job(make_job(configuration, body), FIRE_TIME)

        assert result.status == JobStatus.FAILED
        assert result.error_type == "RuntimeError"
        assert result.error_message == "boom"
        assert result.value is None
        assert "boom" in caplog.text

    async def test_result_to_dict(self, configuration: SchedulerConfiguration) -> None:
        """Test the dictionary form of a result."""
        result = await execute_job(make_job(configuration, lambda payload: None), FIRE_TIME)

        data = result.to_dict()

        assert data["status"] == "SUCCESS"
        assert data["job_key"] == str(configuration.job_key)
        assert data["fire_time"] == FIRE_TIME.isoformat()
