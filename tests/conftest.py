"""Pytest configuration and shared fixtures."""

from collections.abc import AsyncGenerator, Generator

import pytest

from quickscheduler.configuration import SchedulerConfiguration
from quickscheduler.engine import EngineFactory, get_engine_factory
from tests.fakes import FakeEngine


@pytest.fixture(autouse=True)
def clean_engine_factory() -> Generator[None, None, None]:
    """Forget engines created through the global factory between tests."""
    get_engine_factory().clear()
    yield
    get_engine_factory().clear()


@pytest.fixture
async def engine_factory() -> AsyncGenerator[EngineFactory, None]:
    """Create an engine factory whose engines are stopped after the test."""
    factory = EngineFactory()
    yield factory
    await factory.shutdown_all()


@pytest.fixture
def configuration() -> SchedulerConfiguration:
    """Return the canonical default configuration."""
    return SchedulerConfiguration.default()


@pytest.fixture
def fake_engine() -> FakeEngine:
    """Create an engine that records calls."""
    return FakeEngine()
