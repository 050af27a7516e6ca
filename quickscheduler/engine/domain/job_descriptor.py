"""
Job descriptor.
Declarative description of what to run, plus its typed payload.
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

from quickscheduler.engine.domain.keys import JobKey

if TYPE_CHECKING:
    from quickscheduler.configuration.domain.scheduler_configuration import (
        SchedulerConfiguration,
    )

JobBody = Callable[["SchedulerConfiguration"], Any | Awaitable[Any]]


@dataclass(frozen=True)
class JobDescriptor:
    """
    Describes one job held by an engine.

    Attributes:
        key: Identity of the job within the engine.
        body: Callable invoked with the payload each time a trigger fires.
            May be sync or async.
        payload: Configuration the job was created from.
        description: Human-readable description.
    """

    key: JobKey
    body: JobBody
    payload: SchedulerConfiguration
    description: str | None = None

    def __post_init__(self) -> None:
        if not callable(self.body):
            raise ValueError(f"Job '{self.key}' body must be callable")
