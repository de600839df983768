"""Heartbeat — repeating timer that drives the session liveness check."""

import threading
from collections.abc import Callable


class Heartbeat:
    """Timer that calls a callback every interval until stopped."""

    def __init__(self, interval_seconds: float, on_tick: Callable[[], None]) -> None:
        self._interval = interval_seconds
        self._on_tick = on_tick
        self._timer: threading.Timer | None = None
        self._generation = 0
        self._lock = threading.Lock()

    @property
    def interval_seconds(self) -> float:
        return self._interval

    @property
    def is_active(self) -> bool:
        with self._lock:
            return self._timer is not None

    def start(self) -> None:
        """Start ticking, replacing any chain already running."""
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
            self._generation += 1
            self._schedule(self._generation)

    def stop(self) -> None:
        with self._lock:
            if self._timer is not None:
                self._timer.cancel()
                self._timer = None
            self._generation += 1

    def _schedule(self, generation: int) -> None:
        self._timer = threading.Timer(self._interval, self._fire, args=(generation,))
        self._timer.daemon = True
        self._timer.start()

    def _fire(self, generation: int) -> None:
        with self._lock:
            if generation != self._generation:
                return

        # Called without the lock so the callback may stop us.
        try:
            self._on_tick()
        except Exception as e:
            print(f"[Heartbeat] Tick failed: {e}")

        with self._lock:
            if generation == self._generation and self._timer is not None:
                self._schedule(generation)
