"""
conftest.py
-----------
Shared pytest configuration and fixtures for stressfall tests.

Contains:
- Headless SDL setup so pygame-backed collaborators import cleanly
- Common fixtures (config, scheduler, event bus, sinks, seeded RNG)
- Helpers for building rectangles and driving the simulation loop
"""

import os
import random
from types import SimpleNamespace
from unittest.mock import MagicMock

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
os.environ.setdefault("SDL_AUDIODRIVER", "dummy")

from stressfall.core.debug.debug_logger import LoggerConfig
from stressfall.core.runtime.game_config import GameConfig
from stressfall.core.services.event_manager import EventManager
from stressfall.core.services.scheduler import FrameScheduler

FRAME_MS = 1000 / 60


@pytest.fixture(autouse=True)
def quiet_logger():
    """Keep test output clean; restore logger settings afterwards."""
    previous = LoggerConfig.ENABLE_LOGGING
    LoggerConfig.ENABLE_LOGGING = False
    yield
    LoggerConfig.ENABLE_LOGGING = previous


# ===========================================================
# Common Fixtures
# ===========================================================

@pytest.fixture
def config():
    """Default configuration (480x640 board, 44 s session)."""
    return GameConfig()


@pytest.fixture
def scheduler():
    return FrameScheduler()


@pytest.fixture
def events():
    return EventManager()


@pytest.fixture
def mock_events():
    """Mock EventManager for asserting dispatches."""
    event_manager = MagicMock()
    event_manager.dispatch = MagicMock()
    event_manager.subscribe = MagicMock()
    return event_manager


@pytest.fixture
def render_sink():
    """Mock RenderSink with the three sink methods."""
    sink = MagicMock()
    sink.render = MagicMock()
    sink.present_overlay = MagicMock()
    sink.hide_overlay = MagicMock()
    return sink


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def recorder(events):
    """Collect every dispatched event of the given types into a list."""
    def _record(*event_types):
        received = []
        for event_type in event_types:
            events.subscribe(event_type, received.append)
        return received
    return _record


# ===========================================================
# Test Utilities
# ===========================================================

def make_rect(x=0, y=0, width=50, height=50):
    """Plain rectangle with the attributes the collision code reads."""
    return SimpleNamespace(x=x, y=y, width=width, height=height)


def pump_frames(scheduler, count, start_ms=None, step_ms=FRAME_MS):
    """Pump the scheduler count times, step_ms apart."""
    now = scheduler.now_ms if start_ms is None else start_ms
    for _ in range(count):
        scheduler.pump(now)
        now += step_ms
    return now


# Pytest configuration
def pytest_configure(config):
    """Custom pytest configuration."""
    config.addinivalue_line(
        "markers", "slow: marks tests as slow (deselect with '-m \"not slow\"')"
    )
    config.addinivalue_line("markers", "integration: marks tests as integration tests")
    config.addinivalue_line("markers", "unit: marks tests as unit tests")


def pytest_collection_modifyitems(config, items):
    """Tag everything not marked integration as a unit test."""
    for item in items:
        if "integration" not in item.keywords:
            item.add_marker(pytest.mark.unit)
