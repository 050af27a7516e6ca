"""
Scheduler manager.
Keeps the orchestrators of a process by name.
"""

import logging
from collections.abc import Callable
from datetime import datetime

from quickscheduler.configuration.domain.scheduler_configuration import SchedulerConfiguration
from quickscheduler.orchestrator.infrastructure.orchestrator import SchedulingOrchestrator

logger = logging.getLogger(__name__)

OrchestratorFactory = Callable[[SchedulerConfiguration], SchedulingOrchestrator]


class SchedulerManager:
    """
    Orchestrators keyed by the job identity name of their configuration.

    Example:
        manager = SchedulerManager()

        default = SchedulerConfiguration.default()
        await manager.schedule(default)
        await manager.schedule(default.derive(job_value="Boop", trigger_value="5"))

        await manager.reschedule(default.derive(keep_identity=True, trigger_value="10"))
    """

    def __init__(self, orchestrator_factory: OrchestratorFactory = SchedulingOrchestrator) -> None:
        """
        Initialize the manager.

        Args:
            orchestrator_factory: Builds an orchestrator for a configuration.
        """
        self._orchestrator_factory = orchestrator_factory
        self._orchestrators: dict[str, SchedulingOrchestrator] = {}

    def create(self, configuration: SchedulerConfiguration) -> SchedulingOrchestrator:
        """
        Create and keep an orchestrator for a configuration.

        Raises:
            ValueError: If an orchestrator already exists for the job identity.
        """
        name = configuration.job_identity_name
        if name in self._orchestrators:
            raise ValueError(f"Scheduler '{name}' already exists")

        orchestrator = self._orchestrator_factory(configuration)
        self._orchestrators[name] = orchestrator
        logger.info(f"Created scheduler '{name}'")
        return orchestrator

    def get(self, name: str) -> SchedulingOrchestrator | None:
        """Get an orchestrator by job identity name, or None."""
        return self._orchestrators.get(name)

    def get_all(self) -> dict[str, SchedulingOrchestrator]:
        return self._orchestrators.copy()

    def names(self) -> list[str]:
        return list(self._orchestrators)

    async def schedule(self, configuration: SchedulerConfiguration) -> datetime:
        """Create an orchestrator for a configuration and schedule it."""
        return await self.create(configuration).schedule()

    async def reschedule(self, configuration: SchedulerConfiguration) -> datetime:
        """
        Reschedule the orchestrator holding the configuration's job identity.

        Raises:
            KeyError: If no orchestrator exists for the job identity.
        """
        name = configuration.job_identity_name
        orchestrator = self._orchestrators.get(name)
        if orchestrator is None:
            raise KeyError(f"Scheduler '{name}' not found")
        return await orchestrator.reschedule(configuration)
