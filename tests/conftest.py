"""Shared pytest fixtures and configuration."""

from collections.abc import Iterator

import pytest

from deltoid.config import Settings
from deltoid.region import CircleRegion
from deltoid.utils.logging import reset_logging
from deltoid.vector import Vec2


@pytest.fixture(autouse=True)
def reset_logging_state() -> Iterator[None]:
    """Drop any logging handler a test installed."""
    yield
    reset_logging()


@pytest.fixture
def test_settings() -> Settings:
    """Create a Settings instance with test-safe defaults."""
    return Settings(
        LOG_LEVEL="DEBUG",
        LOG_FORMAT="console",
        MAX_ENCLOSED_POINTS=10_000,
        _env_file=None,  # type: ignore[call-arg]
    )


@pytest.fixture
def unit_circle() -> CircleRegion:
    """Circle of radius 1 centred on the origin."""
    return CircleRegion(centre=Vec2.ORIGIN, radius=1)
