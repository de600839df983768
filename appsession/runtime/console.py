"""Interactive console for trying out a session tracker."""

import math
import os
from collections.abc import Callable, Iterable
from pathlib import Path
from typing import Any

import yaml
from dotenv import load_dotenv

from appsession.session.config import SessionConfig
from appsession.session.store import SqlitePropertyStore
from appsession.session.tracker import SessionEndReason, SessionTracker

TIMEOUT_ENV_VAR = "APPSESSION_TIMEOUT_MS"

LIVE_TEXT = "LIVE"
DEAD_TEXT = "DEAD"

HELP_TEXT = """Commands:
  new [payload]   Start a new session
  touch           Normal app activity
  status          Show LIVE/DEAD
  info            Show the session payload
  kill            Force kill the session
  timeout [ms]    Show or set the session timeout
  help            Show this help
  quit            Exit"""


def _valid_timeout(value: float) -> bool:
    return math.isfinite(value) and value >= 0


class SessionConsole:
    """Text stand-in for a session tester screen."""

    def __init__(self, config_path: Path | None = None, timeout_ms: float | None = None) -> None:
        """Initialize the console.

        Args:
            config_path: Path to configuration YAML file.
            timeout_ms: Overrides the configured and environment timeout.
        """
        # Load environment variables
        load_dotenv()

        self.config = self._load_config(config_path)
        session_config = SessionConfig.from_dict(self.config.get("session") or {})

        env_timeout = os.environ.get(TIMEOUT_ENV_VAR)
        if env_timeout:
            try:
                value = float(env_timeout)
            except ValueError:
                value = math.nan
            if _valid_timeout(value):
                session_config.timeout_ms = value
            else:
                print(f"[Config] Ignoring invalid {TIMEOUT_ENV_VAR}={env_timeout!r}")
        if timeout_ms is not None:
            if _valid_timeout(timeout_ms):
                session_config.timeout_ms = timeout_ms
            else:
                print(f"[Config] Ignoring invalid timeout {timeout_ms!r}")

        store = (
            SqlitePropertyStore(session_config.store_path)
            if session_config.store_path is not None
            else None
        )
        self.tracker = SessionTracker(
            config=session_config,
            store=store,
            on_session_end=self._on_session_end,
        )
        self._running = False

        self._commands: dict[str, Callable[[list[str]], None]] = {
            "new": self._cmd_new,
            "touch": self._cmd_touch,
            "status": self._cmd_status,
            "info": self._cmd_info,
            "kill": self._cmd_kill,
            "timeout": self._cmd_timeout,
            "help": self._cmd_help,
        }

    def _load_config(self, config_path: Path | None) -> dict[str, Any]:
        """Load configuration from YAML file.

        Args:
            config_path: Path to config file.

        Returns:
            Configuration dictionary.
        """
        if config_path is None:
            # Try default location
            config_path = Path("config/default.yaml")

        if config_path.exists():
            with open(config_path) as f:
                loaded: dict[str, Any] | None = yaml.safe_load(f)
                return loaded or {}

        # Return minimal default config
        return {"session": {"timeout_ms": 10000}}

    @property
    def status_text(self) -> str:
        return LIVE_TEXT if self.tracker.is_live() else DEAD_TEXT

    def run(self, lines: Iterable[str] | None = None) -> None:
        """Read and execute commands until quit or end of input.

        Args:
            lines: Commands to execute. Reads from stdin when None.
        """
        self._running = True
        print(f"(Session timeout: {self.tracker.get_timeout_ms():g} ms)")
        print("Type 'help' for commands.")
        try:
            source = lines if lines is not None else self._prompt_lines()
            for line in source:
                if not self.handle_command(line):
                    break
        finally:
            self._running = False
            self.tracker.close()

    def handle_command(self, line: str) -> bool:
        """Execute a single command line.

        Returns:
            False when the console should exit.
        """
        parts = line.split()
        if not parts:
            return True

        name, args = parts[0].lower(), parts[1:]
        if name in ("quit", "exit"):
            return False

        command = self._commands.get(name)
        if command is None:
            print(f"Unknown command: {name!r} (try 'help')")
            return True

        command(args)
        return True

    def _prompt_lines(self) -> Iterable[str]:
        while self._running:
            try:
                yield input(f"[{self.status_text}] > ")
            except EOFError:
                return

    def _cmd_new(self, args: list[str]) -> None:
        payload = " ".join(args) if args else None
        self.tracker.start_new_session(payload)
        print(f"New session started ({self.status_text})")

    def _cmd_touch(self, args: list[str]) -> None:
        self.tracker.touch()
        # Check permission to proceed
        if not self.tracker.is_live():
            print("Sorry, that's not allowed! (Start a new session to continue)")

    def _cmd_status(self, args: list[str]) -> None:
        print(self.status_text)

    def _cmd_info(self, args: list[str]) -> None:
        print(f"Session info: {self.tracker.get_session_info()!r}")

    def _cmd_kill(self, args: list[str]) -> None:
        self.tracker.end_session()

    def _cmd_timeout(self, args: list[str]) -> None:
        if args:
            try:
                value = float(args[0])
            except ValueError:
                print(f"Invalid timeout: {args[0]!r}")
                return
            self.tracker.set_timeout_ms(value)
        print(f"Session timeout: {self.tracker.get_timeout_ms():g} ms")

    def _cmd_help(self, args: list[str]) -> None:
        print(HELP_TEXT)

    def _on_session_end(self, reason: SessionEndReason) -> None:
        if reason is SessionEndReason.EXPIRED:
            print(f"Session expired ({DEAD_TEXT})")
