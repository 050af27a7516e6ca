"""Tests for the default job-detail and engine providers."""

import logging

import pytest

from quickscheduler.configuration import SchedulerConfiguration
from quickscheduler.engine import EngineFactory, JobDescriptor
from quickscheduler.provider import DefaultEngineProvider, DefaultJobDetailProvider, log_job_value


def send_report(configuration: SchedulerConfiguration) -> str:
    return f"report:{configuration.job_value}"


class TestDefaultJobDetailProvider:
    """Test cases for DefaultJobDetailProvider."""

    def test_provide(self, configuration: SchedulerConfiguration) -> None:
        """Test the produced job descriptor."""
        provider = DefaultJobDetailProvider(configuration)

        job = provider.provide()

        assert provider.name == "Default"
        assert isinstance(job, JobDescriptor)
        assert job.key == configuration.job_key
        assert job.payload is configuration
        assert job.body is log_job_value

    def test_custom_body_survives_rebinding(self, configuration: SchedulerConfiguration) -> None:
        """Test that with_configuration keeps the job body."""
        provider = DefaultJobDetailProvider(configuration, body=send_report)
        derived = configuration.derive(keep_identity=True, job_value="Boop")

        job = provider.with_configuration(derived).provide()

        assert job.body is send_report
        assert job.payload is derived
        assert job.body(job.payload) == "report:Boop"

    def test_non_callable_body_rejected(self, configuration: SchedulerConfiguration) -> None:
        """Test that a job body must be callable."""
        body = "not callable"
        provider = DefaultJobDetailProvider(configuration, body=body)  # type: ignore[arg-type]

        with pytest.raises(ValueError, match="must be callable"):
            provider.provide()

    def test_log_job_value(
        self, configuration: SchedulerConfiguration, caplog: pytest.LogCaptureFixture
    ) -> None:
        """Test the default job body."""
        with caplog.at_level(logging.INFO):
            result = log_job_value(configuration)

        assert result == "Test"
        assert "Test" in caplog.text


class TestDefaultEngineProvider:
    """Test cases for DefaultEngineProvider."""

    def test_same_engine_for_same_configuration(
        self, configuration: SchedulerConfiguration
    ) -> None:
        """Test that repeated provide() calls reach one engine."""
        factory = EngineFactory()
        provider = DefaultEngineProvider(configuration, factory=factory)

        engine = provider.provide()

        assert provider.name == "Default"
        assert provider.provide() is engine
        assert engine.instance_name == configuration.engine_instance_name
        assert not engine.is_running()

    def test_distinct_jobs_get_distinct_engines(
        self, configuration: SchedulerConfiguration
    ) -> None:
        """Test that engines are named after the job identity."""
        factory = EngineFactory()
        other = configuration.derive(job_value="Boop")

        first = DefaultEngineProvider(configuration, factory=factory).provide()
        second = DefaultEngineProvider(other, factory=factory).provide()

        assert first is not second
        assert set(factory.get_all()) == {configuration.group_name, other.group_name}

    def test_rebinding_keeps_factory(self, configuration: SchedulerConfiguration) -> None:
        """Test that with_configuration keeps the engine factory."""
        factory = EngineFactory()
        provider = DefaultEngineProvider(configuration, factory=factory)

        derived = configuration.derive(keep_identity=True, trigger_value="5")
        rebound = provider.with_configuration(derived)

        assert rebound.factory is factory
        assert rebound.provide() is provider.provide()
