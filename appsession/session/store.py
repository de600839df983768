"""Key-value property stores for the session user id."""

import sqlite3
from pathlib import Path
from typing import Protocol


class PropertyStore(Protocol):
    """Protocol for a string key-value property store."""

    def get_string(self, key: str, default: str | None = None) -> str | None:
        """Read a property.

        Args:
            key: Property name.
            default: Value returned when the property is missing.

        Returns:
            Stored value or default.
        """
        ...

    def set_string(self, key: str, value: str) -> None:
        """Write a property, replacing any previous value."""
        ...

    def remove_property(self, key: str) -> None:
        """Delete a property. Missing keys are ignored."""
        ...


class MemoryPropertyStore:
    """Property store held in a dictionary."""

    def __init__(self) -> None:
        self._values: dict[str, str] = {}

    def get_string(self, key: str, default: str | None = None) -> str | None:
        return self._values.get(key, default)

    def set_string(self, key: str, value: str) -> None:
        self._values[key] = value

    def remove_property(self, key: str) -> None:
        self._values.pop(key, None)


class SqlitePropertyStore:
    """Property store persisted in a SQLite database file."""

    def __init__(self, db_path: Path) -> None:
        self._db_path = db_path
        self._init_db()

    def _init_db(self) -> None:
        self._db_path.parent.mkdir(parents=True, exist_ok=True)
        conn = sqlite3.connect(self._db_path)
        conn.execute(
            """CREATE TABLE IF NOT EXISTS properties (
                key TEXT PRIMARY KEY,
                value TEXT NOT NULL
            )"""
        )
        conn.commit()
        conn.close()

    def get_string(self, key: str, default: str | None = None) -> str | None:
        conn = sqlite3.connect(self._db_path)
        row = conn.execute("SELECT value FROM properties WHERE key = ?", (key,)).fetchone()
        conn.close()
        if row is None:
            return default
        value: str = row[0]
        return value

    def set_string(self, key: str, value: str) -> None:
        conn = sqlite3.connect(self._db_path)
        conn.execute(
            "INSERT OR REPLACE INTO properties (key, value) VALUES (?, ?)",
            (key, value),
        )
        conn.commit()
        conn.close()

    def remove_property(self, key: str) -> None:
        conn = sqlite3.connect(self._db_path)
        conn.execute("DELETE FROM properties WHERE key = ?", (key,))
        conn.commit()
        conn.close()
