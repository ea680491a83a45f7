"""
Shared pytest fixtures for the architecture core tests.

Every test starts with no shared architecture instances, no register
patches and a fresh global event bus.
"""

import pytest

from architecture import Architecture
from core.event_bus import EventBus
from demo.score import ScoreArchitecture


@pytest.fixture(autouse=True)
def clean_globals():
    """Reset process-wide singletons before and after each test."""
    Architecture._instances.clear()
    Architecture._register_patches.clear()
    EventBus.reset_global()
    yield
    Architecture._instances.clear()
    Architecture._register_patches.clear()
    EventBus.reset_global()


@pytest.fixture
def score_arch() -> ScoreArchitecture:
    """A fully initialized score architecture used as an explicit context."""
    arch = ScoreArchitecture()
    arch.ensure_initialized()
    return arch


class Recorder:
    """Callable that records every payload it is called with."""

    def __init__(self, name: str = "", log: list | None = None):
        self.name = name
        self.calls: list = []
        self.log = log

    def __call__(self, payload) -> None:
        self.calls.append(payload)
        if self.log is not None:
            self.log.append((self.name, payload))


@pytest.fixture
def recorder_factory():
    """Build named recorders that append to a shared ordered log."""
    log: list = []

    def make(name: str = "") -> Recorder:
        return Recorder(name, log)

    make.log = log
    return make
