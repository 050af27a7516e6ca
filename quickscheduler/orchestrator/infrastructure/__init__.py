"""Infrastructure layer for scheduling orchestration."""

from quickscheduler.orchestrator.infrastructure.orchestrator import SchedulingOrchestrator
from quickscheduler.orchestrator.infrastructure.scheduler_manager import SchedulerManager

__all__ = ["SchedulingOrchestrator", "SchedulerManager"]
