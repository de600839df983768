"""Session configuration."""

from dataclasses import dataclass
from pathlib import Path
from typing import Any

DEFAULT_TIMEOUT_MS = 600000  # 10 min
MIN_HEARTBEAT_MS = 15000
USER_ID_KEY = "SESSION_USER_ID"


@dataclass
class SessionConfig:
    """Configuration for a session tracker."""

    timeout_ms: float = DEFAULT_TIMEOUT_MS  # 0 = never expire
    min_heartbeat_ms: float = MIN_HEARTBEAT_MS  # Fastest allowed liveness check
    user_id_key: str = USER_ID_KEY
    store_path: Path | None = None  # None = keep the user id in memory only

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "SessionConfig":
        """Create config from dictionary.

        Args:
            data: Configuration dictionary (the ``session`` section).

        Returns:
            SessionConfig instance.
        """
        store_path = data.get("store_path")
        return cls(
            timeout_ms=float(data.get("timeout_ms", DEFAULT_TIMEOUT_MS)),
            min_heartbeat_ms=float(data.get("min_heartbeat_ms", MIN_HEARTBEAT_MS)),
            user_id_key=str(data.get("user_id_key", USER_ID_KEY)),
            store_path=Path(store_path) if store_path is not None else None,
        )
