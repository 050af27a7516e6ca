"""Tests for EngineFactory."""

import pytest

from quickscheduler.engine import AsyncioEngine, EngineFactory, get_engine_factory


class TestEngineFactory:
    """Test cases for EngineFactory."""

    def test_same_name_same_engine(self) -> None:
        """Test that an instance name maps to one engine."""
        factory = EngineFactory()

        engine = factory.get_engine("reports")

        assert isinstance(engine, AsyncioEngine)
        assert factory.get_engine("reports") is engine
        assert factory.get_engine("billing") is not engine
        assert set(factory.get_all()) == {"reports", "billing"}

    def test_empty_name_rejected(self) -> None:
        """Test that an engine needs a name."""
        with pytest.raises(ValueError, match="cannot be empty"):
            EngineFactory().get_engine("")

    def test_clear(self) -> None:
        """Test forgetting engines."""
        factory = EngineFactory()
        engine = factory.get_engine("reports")

        factory.clear()

        assert factory.get_all() == {}
        assert factory.get_engine("reports") is not engine

    def test_global_factory(self) -> None:
        """Test that the global factory is shared."""
        assert get_engine_factory() is get_engine_factory()

    @pytest.mark.asyncio
    async def test_shutdown_all(self) -> None:
        """Test stopping every engine."""
        factory = EngineFactory()
        engine = factory.get_engine("reports")
        await engine.start()

        await factory.shutdown_all()

        assert not engine.is_running()
