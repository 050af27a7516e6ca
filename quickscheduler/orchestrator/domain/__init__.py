"""Domain layer for scheduling orchestration."""

from quickscheduler.orchestrator.domain.orchestrator_state import OrchestratorState

__all__ = ["OrchestratorState"]
