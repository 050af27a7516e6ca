"""
Engine factory.
Creates engines by instance name and hands out the same engine for the same
name.
"""

import logging
from collections.abc import Callable

from quickscheduler.engine.domain.engine_port import EnginePort
from quickscheduler.engine.infrastructure.asyncio_engine import AsyncioEngine

logger = logging.getLogger(__name__)


class EngineFactory:
    """
    Creates or reuses engines keyed by instance name.

    Example:
        factory = EngineFactory()

        engine = factory.get_engine("reports")
        assert factory.get_engine("reports") is engine
    """

    def __init__(self, engine_class: Callable[[str], EnginePort] = AsyncioEngine) -> None:
        """
        Initialize the factory.

        Args:
            engine_class: Callable building a new engine from an instance name.
        """
        self._engine_class = engine_class
        self._engines: dict[str, EnginePort] = {}

    def get_engine(self, instance_name: str) -> EnginePort:
        """
        Get the engine registered under ``instance_name``, creating it if needed.

        Created engines are kept until clear() is called, including engines
        that never receive a trigger.

        Args:
            instance_name: Engine instance name.

        Returns:
            The engine. It is not started by the factory.
        """
        if not instance_name:
            raise ValueError("Engine instance name cannot be empty")

        engine = self._engines.get(instance_name)
        if engine is None:
            engine = self._engine_class(instance_name)
            self._engines[instance_name] = engine
            logger.info(f"Created engine '{instance_name}'")
        return engine

    def get_all(self) -> dict[str, EnginePort]:
        """
        Get all engines created so far.

        Returns:
            Dictionary mapping instance names to engines.
        """
        return self._engines.copy()

    async def shutdown_all(self) -> None:
        """Stop every engine created by this factory."""
        for engine in self._engines.values():
            if engine.is_running():
                await engine.stop()

    def clear(self) -> None:
        """Forget all engines (useful for testing)."""
        self._engines.clear()


# Global factory instance
_global_factory = EngineFactory()


def get_engine_factory() -> EngineFactory:
    """
    Get the global engine factory.

    Returns:
        The global EngineFactory instance.
    """
    return _global_factory
