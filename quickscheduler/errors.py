"""
Scheduling exceptions.

Every error raised by the provider, registry and engine layers derives from
SchedulingError. Each kind also mixes in the builtin that best describes it,
so callers may catch either.
"""


class SchedulingError(Exception):
    """Base exception for all scheduling errors."""

    pass


class MissingValueError(SchedulingError, ValueError):
    """Raised when a trigger strategy requires a value that was not provided."""

    def __init__(self, strategy_name: str, expected: str):
        self.strategy_name = strategy_name
        super().__init__(
            f"TriggerValue for strategy '{strategy_name}' was not provided "
            f"(expected {expected}). The value was None."
        )


class InvalidFormatError(SchedulingError, ValueError):
    """Raised when a trigger value is present but cannot be parsed."""

    def __init__(self, strategy_name: str, value: str, expected: str):
        self.strategy_name = strategy_name
        self.value = value
        super().__init__(
            f"TriggerValue for strategy '{strategy_name}' was not formatted as "
            f"{expected}. The value was {value!r}."
        )


class ProviderNotRegisteredError(SchedulingError, LookupError):
    """Raised when a provider is requested by a name nobody registered."""

    def __init__(self, name: str | None, registered: list[str]):
        self.name = name
        self.registered = registered
        super().__init__(f"Provider '{name}' is not registered (registered: {registered})")


class DuplicateProviderError(SchedulingError, ValueError):
    """Raised when two providers are registered under the same name."""

    def __init__(self, name: str):
        self.name = name
        super().__init__(f"Provider '{name}' is already registered")


class EngineError(SchedulingError):
    """Base exception for failures reported by a scheduling engine."""

    pass


class JobAlreadyExistsError(EngineError):
    """Raised when a job key is scheduled twice on the same engine."""

    def __init__(self, job_key: object):
        self.job_key = job_key
        super().__init__(f"Job '{job_key}' already exists")


class TriggerAlreadyExistsError(EngineError):
    """Raised when a trigger key is scheduled twice on the same engine."""

    def __init__(self, trigger_key: object):
        self.trigger_key = trigger_key
        super().__init__(f"Trigger '{trigger_key}' already exists")


class TriggerNotFoundError(EngineError, LookupError):
    """Raised when rescheduling a trigger key the engine does not hold."""

    def __init__(self, trigger_key: object):
        self.trigger_key = trigger_key
        super().__init__(f"Trigger '{trigger_key}' not found")


class InvalidTriggerError(EngineError, ValueError):
    """Raised when the engine cannot build a fire schedule for a trigger."""

    pass
