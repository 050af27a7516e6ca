"""Job execution status enumeration."""

from enum import StrEnum, auto


class JobStatus(StrEnum):
    """Represents the outcome of one job execution.

    Attributes:
        SUCCESS: Job body returned normally
        FAILED: Job body raised an exception
    """

    SUCCESS = auto()
    FAILED = auto()

    def is_successful(self) -> bool:
        """Check if this status indicates successful execution.

        Returns:
            True only if status is SUCCESS
        """
        return self == JobStatus.SUCCESS
