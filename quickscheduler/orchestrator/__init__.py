"""Scheduling orchestration over providers and engines."""

from quickscheduler.orchestrator.domain import OrchestratorState
from quickscheduler.orchestrator.infrastructure import SchedulerManager, SchedulingOrchestrator

__all__ = ["OrchestratorState", "SchedulingOrchestrator", "SchedulerManager"]
