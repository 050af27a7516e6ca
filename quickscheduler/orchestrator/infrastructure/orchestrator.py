"""
Scheduling orchestrator.
Resolves providers for one configuration and drives an engine through the
schedule and reschedule lifecycle.
"""

from __future__ import annotations

import logging
from datetime import datetime

from quickscheduler.configuration.domain.scheduler_configuration import SchedulerConfiguration
from quickscheduler.engine.domain.engine_port import EnginePort
from quickscheduler.engine.domain.job_descriptor import JobDescriptor
from quickscheduler.engine.domain.keys import JobKey, TriggerKey
from quickscheduler.engine.domain.trigger_descriptor import TriggerDescriptor
from quickscheduler.orchestrator.domain.orchestrator_state import OrchestratorState
from quickscheduler.registry.domain.registry_port import RegistryPort
from quickscheduler.registry.infrastructure.builtin_registries import (
    create_engine_registry,
    create_job_detail_registry,
    create_trigger_registry,
)

logger = logging.getLogger(__name__)


class SchedulingOrchestrator:
    """Drives one configuration through an engine.

    The orchestrator owns one configuration and one registry per provider
    family. Each operation resolves providers by the names held in the
    configuration, builds fresh resources from them and hands those to the
    engine, awaiting each engine call before continuing.

    Lifecycle:
    - UNSCHEDULED: initial state
    - schedule(): UNSCHEDULED -> SCHEDULED
    - reschedule(): SCHEDULED -> SCHEDULED, swapping the trigger only

    Errors from providers and the engine propagate unchanged. Nothing is
    rolled back: an engine started by a failed schedule() stays started.

    Example:
        orchestrator = SchedulingOrchestrator(SchedulerConfiguration.default())
        await orchestrator.schedule()

        await orchestrator.reschedule(
            orchestrator.configuration.derive(keep_identity=True, trigger_value="5")
        )
    """

    def __init__(
        self,
        configuration: SchedulerConfiguration,
        trigger_providers: RegistryPort[TriggerDescriptor] | None = None,
        job_detail_providers: RegistryPort[JobDescriptor] | None = None,
        engine_providers: RegistryPort[EnginePort] | None = None,
    ) -> None:
        """
        Initialize the orchestrator.

        Args:
            configuration: Configuration to schedule.
            trigger_providers: Trigger registry. Defaults to Cron and Interval.
            job_detail_providers: Job-detail registry. Defaults to the default
                job-detail provider.
            engine_providers: Engine registry. Defaults to the default engine
                provider backed by the global engine factory.
        """
        if trigger_providers is None:
            trigger_providers = create_trigger_registry(configuration)
        if job_detail_providers is None:
            job_detail_providers = create_job_detail_registry(configuration)
        if engine_providers is None:
            engine_providers = create_engine_registry(configuration)

        self._configuration = configuration
        self._trigger_providers = trigger_providers
        self._job_detail_providers = job_detail_providers
        self._engine_providers = engine_providers
        self._state = OrchestratorState.UNSCHEDULED

    @property
    def configuration(self) -> SchedulerConfiguration:
        return self._configuration

    @property
    def state(self) -> OrchestratorState:
        return self._state

    @property
    def job_key(self) -> JobKey:
        return self._configuration.job_key

    @property
    def trigger_key(self) -> TriggerKey:
        return self._configuration.trigger_key

    def is_scheduled(self) -> bool:
        return self._state == OrchestratorState.SCHEDULED

    async def schedule(self) -> datetime:
        """
        Start the engine and hand it the job and its trigger.

        Returns:
            The first fire time reported by the engine.
        """
        configuration = self._configuration

        engine = self._engine_providers.get(configuration.scheduler_name).provide()
        await engine.start()

        job = self._job_detail_providers.get(configuration.job_name).provide()
        trigger = self._trigger_providers.get(configuration.trigger_strategy_name).provide()

        first_fire_time = await engine.schedule_job(job, trigger)
        self._state = OrchestratorState.SCHEDULED

        logger.info(
            f"Scheduled job '{job.key}' on engine '{engine.instance_name}' "
            f"with {type(trigger).__name__} '{trigger.key}'"
        )
        return first_fire_time

    async def reschedule(self, configuration: SchedulerConfiguration | None = None) -> datetime:
        """
        Replace the active trigger with a fresh one. The job is not touched.

        A replacement configuration is adopted only once the engine has
        accepted the new trigger. On any failure the orchestrator keeps its
        current configuration and the engine keeps the old trigger.

        Calling this before schedule() makes the engine provider hand out an
        engine for this job's instance name, which stays idle in the engine
        factory until the factory is cleared.

        Args:
            configuration: Optional replacement configuration for the same
                logical job (same job instance id), e.g. one derived with
                ``derive(keep_identity=True, trigger_value=...)``.

        Returns:
            The next fire time of the new trigger.

        Raises:
            ValueError: If ``configuration`` names a different job instance.
            TriggerNotFoundError: If the engine holds no trigger under the key,
                e.g. when called before schedule().
        """
        if configuration is None:
            configuration = self._configuration
            trigger_providers = self._trigger_providers
            job_detail_providers = self._job_detail_providers
            engine_providers = self._engine_providers
        else:
            self._check_same_job(configuration)
            trigger_providers = self._trigger_providers.with_configuration(configuration)
            job_detail_providers = self._job_detail_providers.with_configuration(configuration)
            engine_providers = self._engine_providers.with_configuration(configuration)

        trigger_provider = trigger_providers.get(configuration.trigger_strategy_name)
        engine = engine_providers.get(configuration.scheduler_name).provide()

        trigger_key = configuration.trigger_key
        trigger = trigger_provider.provide()

        next_fire_time = await engine.reschedule_job(trigger_key, trigger)

        self._configuration = configuration
        self._trigger_providers = trigger_providers
        self._job_detail_providers = job_detail_providers
        self._engine_providers = engine_providers

        logger.info(f"Rescheduled trigger '{trigger_key}' on engine '{engine.instance_name}'")
        return next_fire_time

    def _check_same_job(self, configuration: SchedulerConfiguration) -> None:
        if configuration.job_instance_id != self._configuration.job_instance_id:
            raise ValueError(
                f"Cannot reschedule job instance {self._configuration.job_instance_id} "
                f"with a configuration for {configuration.job_instance_id}"
            )
