"""
Job-detail provider.
Builds the job descriptor carrying a configuration to its job body.
"""

from __future__ import annotations

import logging

from quickscheduler.configuration.domain.scheduler_configuration import SchedulerConfiguration
from quickscheduler.engine.domain.job_descriptor import JobBody, JobDescriptor
from quickscheduler.provider.domain.provider_name import DEFAULT_PROVIDER_NAME

logger = logging.getLogger(__name__)


def log_job_value(configuration: SchedulerConfiguration) -> str | None:
    """Default job body: log the job value and return it."""
    logger.info(
        f"Job '{configuration.job_identity_name}' fired with value: {configuration.job_value}"
    )
    return configuration.job_value


class DefaultJobDetailProvider:
    """
    Provides a job bound to the configuration's job identity.

    The configuration itself is the job payload; the body receives it
    directly when the job fires.

    Example:
        provider = DefaultJobDetailProvider(configuration, body=send_report)
        job = provider.provide()
    """

    name = DEFAULT_PROVIDER_NAME

    def __init__(
        self, configuration: SchedulerConfiguration, body: JobBody = log_job_value
    ) -> None:
        """
        Initialize the provider.

        Args:
            configuration: Configuration the job is built from.
            body: Callable invoked with the configuration each time the job fires.
        """
        self.configuration = configuration
        self.body = body

    def provide(self) -> JobDescriptor:
        return JobDescriptor(
            key=self.configuration.job_key,
            body=self.body,
            payload=self.configuration,
            description=(
                f"Job '{self.configuration.job_name}' of scheduler "
                f"'{self.configuration.scheduler_name}'"
            ),
        )

    def with_configuration(self, configuration: SchedulerConfiguration) -> DefaultJobDetailProvider:
        return DefaultJobDetailProvider(configuration, body=self.body)
