"""Session lifecycle tracking with inactivity timeout."""

from appsession.session.config import SessionConfig
from appsession.session.heartbeat import Heartbeat
from appsession.session.store import MemoryPropertyStore, PropertyStore, SqlitePropertyStore
from appsession.session.tracker import SessionEndReason, SessionState, SessionTracker

__all__ = [
    "Heartbeat",
    "MemoryPropertyStore",
    "PropertyStore",
    "SessionConfig",
    "SessionEndReason",
    "SessionState",
    "SessionTracker",
    "SqlitePropertyStore",
]
