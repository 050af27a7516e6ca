"""Tests for SchedulerManager."""

import pytest

from quickscheduler.configuration import SchedulerConfiguration
from quickscheduler.engine import EngineFactory, IntervalTriggerDescriptor
from quickscheduler.orchestrator import OrchestratorState, SchedulerManager, SchedulingOrchestrator
from quickscheduler.registry import create_engine_registry


@pytest.fixture
def manager(engine_factory: EngineFactory) -> SchedulerManager:
    """Create a manager whose orchestrators use the test engine factory."""

    def orchestrator_factory(configuration: SchedulerConfiguration) -> SchedulingOrchestrator:
        return SchedulingOrchestrator(
            configuration,
            engine_providers=create_engine_registry(configuration, factory=engine_factory),
        )

    return SchedulerManager(orchestrator_factory)


@pytest.mark.asyncio
class TestSchedulerManager:
    """Test cases for SchedulerManager."""

    async def test_schedule_two_jobs(
        self, manager: SchedulerManager, configuration: SchedulerConfiguration
    ) -> None:
        """Test scheduling a configuration and a derived one side by side."""
        derived = configuration.derive(job_value="Boop", trigger_value="5")

        await manager.schedule(configuration)
        await manager.schedule(derived)

        assert manager.names() == [configuration.job_identity_name, derived.job_identity_name]
        for name in manager.names():
            orchestrator = manager.get(name)
            assert orchestrator is not None
            assert orchestrator.state == OrchestratorState.SCHEDULED

    async def test_create_duplicate(
        self, manager: SchedulerManager, configuration: SchedulerConfiguration
    ) -> None:
        """Test that one job identity maps to one orchestrator."""
        manager.create(configuration)

        with pytest.raises(ValueError, match="already exists"):
            manager.create(configuration)

    async def test_reschedule(
        self,
        manager: SchedulerManager,
        configuration: SchedulerConfiguration,
        engine_factory: EngineFactory,
    ) -> None:
        """Test rescheduling through the manager."""
        await manager.schedule(configuration)

        await manager.reschedule(configuration.derive(keep_identity=True, trigger_value="10"))

        engine = engine_factory.get_engine(configuration.engine_instance_name)
        trigger = engine.get_trigger(configuration.trigger_key)
        assert isinstance(trigger, IntervalTriggerDescriptor)
        assert trigger.interval_seconds == 10

    async def test_reschedule_unknown(
        self, manager: SchedulerManager, configuration: SchedulerConfiguration
    ) -> None:
        """Test rescheduling a job the manager does not hold."""
        with pytest.raises(KeyError):
            await manager.reschedule(configuration)

    async def test_get_unknown(self, manager: SchedulerManager) -> None:
        """Test looking up an unknown name."""
        assert manager.get("missing") is None
        assert manager.get_all() == {}
