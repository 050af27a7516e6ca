"""
Engine port definition.
Defines the narrow interface through which jobs and triggers reach a
scheduling engine.
"""

from abc import ABC, abstractmethod
from datetime import datetime

from quickscheduler.engine.domain.job_descriptor import JobDescriptor
from quickscheduler.engine.domain.keys import JobKey, TriggerKey
from quickscheduler.engine.domain.trigger_descriptor import TriggerDescriptor


class EnginePort(ABC):
    """
    Abstract port for a scheduling engine.
    Holds jobs and their triggers and fires job bodies on its own schedule.
    """

    @property
    @abstractmethod
    def instance_name(self) -> str:
        """Name the engine was created under."""
        raise NotImplementedError

    @abstractmethod
    async def start(self) -> None:
        """
        Start the engine.
        Triggers scheduled before or after start begin firing once started.
        """
        raise NotImplementedError

    @abstractmethod
    async def stop(self) -> None:
        """Stop firing triggers and release background resources."""
        raise NotImplementedError

    @abstractmethod
    def is_running(self) -> bool:
        """
        Check if the engine is started.

        Returns:
            True if running, False otherwise.
        """
        raise NotImplementedError

    @abstractmethod
    async def schedule_job(self, job: JobDescriptor, trigger: TriggerDescriptor) -> datetime:
        """
        Add a job together with the trigger that fires it.

        Args:
            job: Job to add.
            trigger: Trigger that fires the job.

        Returns:
            The first fire time of the trigger.

        Raises:
            JobAlreadyExistsError: If the job key is already held.
            TriggerAlreadyExistsError: If the trigger key is already held.
        """
        raise NotImplementedError

    @abstractmethod
    async def reschedule_job(self, trigger_key: TriggerKey, trigger: TriggerDescriptor) -> datetime:
        """
        Replace the trigger stored under ``trigger_key`` with a new one.
        The job fired by the old trigger is kept and fired by the new one.

        Args:
            trigger_key: Key of the trigger to replace.
            trigger: The replacement trigger.

        Returns:
            The next fire time of the new trigger.

        Raises:
            TriggerNotFoundError: If no trigger is stored under the key.
        """
        raise NotImplementedError

    @abstractmethod
    def get_job(self, job_key: JobKey) -> JobDescriptor | None:
        """Get a job by key, or None."""
        raise NotImplementedError

    @abstractmethod
    def get_trigger(self, trigger_key: TriggerKey) -> TriggerDescriptor | None:
        """Get a trigger by key, or None."""
        raise NotImplementedError

    @abstractmethod
    def get_job_keys(self) -> list[JobKey]:
        """Get the keys of all held jobs."""
        raise NotImplementedError

    @abstractmethod
    def get_trigger_keys(self) -> list[TriggerKey]:
        """Get the keys of all held triggers."""
        raise NotImplementedError
