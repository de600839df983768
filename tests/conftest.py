"""Shared test fixtures."""

from collections.abc import Callable

import pytest

from appsession.session.config import SessionConfig
from appsession.session.tracker import SessionTracker


class FakeClock:
    """Manually advanced monotonic clock (seconds)."""

    def __init__(self, start: float = 1000.0) -> None:
        self.now = start

    def __call__(self) -> float:
        return self.now

    def advance_ms(self, ms: float) -> None:
        self.now += ms / 1000


class FakeHeartbeat:
    """Heartbeat that only ticks when told to."""

    def __init__(self, interval_seconds: float, on_tick: Callable[[], None]) -> None:
        self.interval_seconds = interval_seconds
        self._on_tick = on_tick
        self.is_active = False

    def start(self) -> None:
        self.is_active = True

    def stop(self) -> None:
        self.is_active = False

    def tick(self) -> None:
        if self.is_active:
            self._on_tick()


class HeartbeatRecorder:
    """Heartbeat factory that keeps every heartbeat it builds."""

    def __init__(self) -> None:
        self.built: list[FakeHeartbeat] = []

    def __call__(self, interval_seconds: float, on_tick: Callable[[], None]) -> FakeHeartbeat:
        heartbeat = FakeHeartbeat(interval_seconds, on_tick)
        self.built.append(heartbeat)
        return heartbeat

    @property
    def last(self) -> FakeHeartbeat:
        return self.built[-1]


@pytest.fixture
def clock() -> FakeClock:
    """Create a controllable clock."""
    return FakeClock()


@pytest.fixture
def heartbeats() -> HeartbeatRecorder:
    """Create a recording heartbeat factory."""
    return HeartbeatRecorder()


@pytest.fixture
def session_config() -> SessionConfig:
    """Create a test session configuration."""
    return SessionConfig(timeout_ms=100, min_heartbeat_ms=15000)


@pytest.fixture
def tracker(
    session_config: SessionConfig, clock: FakeClock, heartbeats: HeartbeatRecorder
) -> SessionTracker:
    """Create a tracker driven by the fake clock and heartbeat."""
    t = SessionTracker(config=session_config, clock=clock, heartbeat_factory=heartbeats)
    yield t  # type: ignore[misc]
    t.close()
