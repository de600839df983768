"""Session tracker — a single session that expires after inactivity.

Sample usage::

    tracker = SessionTracker()
    tracker.set_timeout_ms(30000)  # 0 means never expire

    # Start a new session, e.g. after a login.
    tracker.start_new_session("user67")

    # Touch the session whenever a UI event occurs.
    tracker.touch()

    tracker.get_user_id()  # "user67"
    tracker.is_live()      # True as long as there is touch activity

    # Terminate the session, e.g. after a logout.
    tracker.end_session()
    tracker.is_live()      # False
"""

import math
import threading
import time
from collections.abc import Callable
from enum import Enum, auto
from typing import Any

from appsession.session.config import DEFAULT_TIMEOUT_MS, SessionConfig
from appsession.session.heartbeat import Heartbeat
from appsession.session.store import PropertyStore


class SessionState(Enum):
    """Observable session states."""

    INACTIVE = auto()
    LIVE = auto()
    EXPIRED = auto()  # Timed out, not cleaned up yet


class SessionEndReason(Enum):
    """Why a session was torn down."""

    EXPLICIT = auto()
    EXPIRED = auto()
    REPLACED = auto()


class SessionTracker:
    """Tracks liveness of one session and expires it after inactivity."""

    def __init__(
        self,
        config: SessionConfig | None = None,
        store: PropertyStore | None = None,
        on_session_end: Callable[[SessionEndReason], None] | None = None,
        clock: Callable[[], float] = time.monotonic,
        heartbeat_factory: Callable[[float, Callable[[], None]], Heartbeat] = Heartbeat,
    ) -> None:
        """Initialize the tracker with no active session.

        Args:
            config: Timeout and heartbeat settings.
            store: Optional property store that mirrors the session user id.
            on_session_end: Called after a live or stale session is torn down.
            clock: Monotonic clock returning seconds.
            heartbeat_factory: Builds the liveness check from an interval in
                seconds and a tick callback.
        """
        self._config = config or SessionConfig()
        self._store = store
        self._on_session_end = on_session_end
        self._clock = clock
        self._heartbeat_factory = heartbeat_factory
        self._lock = threading.RLock()

        self._last_access_ms: float | None = None
        self._payload: Any = None
        self._heartbeat: Heartbeat | None = None

        self._timeout_ms = float(DEFAULT_TIMEOUT_MS)
        self.set_timeout_ms(self._config.timeout_ms)

    def set_timeout_ms(self, timeout_ms: Any) -> None:
        """Set the inactivity timeout.

        Invalid values (negative, non-numeric, NaN) are ignored and the
        previous timeout is kept. A value of 0 disables expiry.
        """
        if isinstance(timeout_ms, bool) or not isinstance(timeout_ms, int | float):
            return
        if not math.isfinite(timeout_ms) or timeout_ms < 0:
            return

        with self._lock:
            self._timeout_ms = float(timeout_ms)
            if self._last_access_ms is not None:
                self._start_heartbeat()

    def get_timeout_ms(self) -> float:
        return self._timeout_ms

    @property
    def heartbeat_interval_ms(self) -> float:
        """Period of the liveness check: a quarter of the timeout, but never too fast."""
        return max(self._config.min_heartbeat_ms, self._timeout_ms / 4)

    @property
    def heartbeat_active(self) -> bool:
        with self._lock:
            return self._heartbeat is not None and self._heartbeat.is_active

    @property
    def state(self) -> SessionState:
        with self._lock:
            if self._last_access_ms is None:
                return SessionState.INACTIVE
            return SessionState.LIVE if self.is_live() else SessionState.EXPIRED

    def start_new_session(self, payload: Any = None) -> None:
        """Start a new session, ending any current one first.

        Args:
            payload: Data to keep with the session (e.g. a user id). Stored
                as given, so falsy values such as 0 or "" are kept.
        """
        with self._lock:
            self._end(SessionEndReason.REPLACED)

            self._payload = payload
            if self._store is not None and payload is not None:
                try:
                    self._store.set_string(self._config.user_id_key, str(payload))
                except Exception as e:
                    print(f"[Session] Could not store user id: {e}")
            self._last_access_ms = self._now_ms()
            self._start_heartbeat()

    def touch(self) -> None:
        """Mark activity on a live session. Dead sessions are not revived."""
        with self._lock:
            if self.is_live():
                self._last_access_ms = self._now_ms()
            else:
                print("[Session] TOUCH (dead session)")

    def get_session_info(self) -> Any:
        """Return the session payload.

        Reading counts as activity: a live session is touched. If the
        session is no longer live, it is torn down before returning, so
        an expired session always yields None.
        """
        with self._lock:
            self._touch_or_end()
            return self._payload

    def get_user_id(self) -> Any:
        """Return the session user id, from the property store if one is set."""
        with self._lock:
            self._touch_or_end()
            if self._store is not None:
                try:
                    return self._store.get_string(self._config.user_id_key)
                except Exception as e:
                    print(f"[Session] Could not read user id: {e}")
                    return None
            return self._payload

    def is_live(self) -> bool:
        """Check whether the session has been touched within the timeout."""
        with self._lock:
            if self._last_access_ms is None:
                return False
            if self._timeout_ms <= 0:
                return True
            return self._now_ms() - self._last_access_ms < self._timeout_ms

    def end_session(self) -> None:
        """Remove all information related to the current session."""
        self._end(SessionEndReason.EXPLICIT)

    def close(self) -> None:
        """Stop background work without ending the session."""
        with self._lock:
            self._stop_heartbeat()

    def _touch_or_end(self) -> None:
        if self.is_live():
            self._last_access_ms = self._now_ms()
        else:
            self._end(SessionEndReason.EXPIRED)

    def _end(self, reason: SessionEndReason) -> None:
        with self._lock:
            had_session = self._last_access_ms is not None
            self._stop_heartbeat()
            self._last_access_ms = None
            self._payload = None
            if self._store is not None:
                try:
                    self._store.remove_property(self._config.user_id_key)
                except Exception as e:
                    print(f"[Session] Could not remove user id: {e}")
            print("[Session] Your session has ended!")

            if had_session and self._on_session_end is not None:
                try:
                    self._on_session_end(reason)
                except Exception as e:
                    print(f"[Session] on_session_end callback failed: {e}")

    def _start_heartbeat(self) -> None:
        self._stop_heartbeat()
        if self._timeout_ms > 0:
            self._heartbeat = self._heartbeat_factory(
                self.heartbeat_interval_ms / 1000, self._on_heartbeat
            )
            self._heartbeat.start()

    def _stop_heartbeat(self) -> None:
        if self._heartbeat is not None:
            self._heartbeat.stop()
            self._heartbeat = None

    def _on_heartbeat(self) -> None:
        """Heartbeat tick: clean up a session that expired silently."""
        with self._lock:
            if self._last_access_ms is None or self.is_live():
                return
            print("[Heartbeat] Session expired, cleaning up")
            self._end(SessionEndReason.EXPIRED)

    def _now_ms(self) -> float:
        return self._clock() * 1000
