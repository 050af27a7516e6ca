"""Identity keys for jobs and triggers held by an engine."""

from dataclasses import dataclass


@dataclass(frozen=True)
class JobKey:
    """Identifies one job within an engine by (name, group)."""

    name: str
    group: str

    def __str__(self) -> str:
        return f"{self.group}.{self.name}"


@dataclass(frozen=True)
class TriggerKey:
    """Identifies one active trigger within an engine by (name, group)."""

    name: str
    group: str

    def __str__(self) -> str:
        return f"{self.group}.{self.name}"
