"""Orchestrator lifecycle states."""

from enum import StrEnum, auto


class OrchestratorState(StrEnum):
    """Represents where an orchestrator is in its lifecycle.

    Attributes:
        UNSCHEDULED: No job has been handed to the engine yet
        SCHEDULED: The job and its trigger are held by the engine
    """

    UNSCHEDULED = auto()
    SCHEDULED = auto()
