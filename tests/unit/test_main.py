"""Tests for the command line entry point."""

from pathlib import Path
from unittest.mock import MagicMock, patch

import pytest

from appsession import __version__
from appsession.main import main


class TestMain:
    def test_version(self, capsys: pytest.CaptureFixture[str]) -> None:
        assert main(["--version"]) == 0
        assert f"Appsession v{__version__}" in capsys.readouterr().out

    def test_runs_console(self, tmp_path: Path) -> None:
        with patch("appsession.main.SessionConsole") as console_cls:
            assert main(["--config", str(tmp_path / "c.yaml"), "--timeout-ms", "250"]) == 0

        console_cls.assert_called_once_with(config_path=tmp_path / "c.yaml", timeout_ms=250.0)
        console_cls.return_value.run.assert_called_once()

    def test_keyboard_interrupt(self, capsys: pytest.CaptureFixture[str]) -> None:
        console = MagicMock()
        console.run.side_effect = KeyboardInterrupt
        with patch("appsession.main.SessionConsole", return_value=console):
            assert main([]) == 0
        assert "Interrupted by user." in capsys.readouterr().out

    def test_error_returns_one(self, capsys: pytest.CaptureFixture[str]) -> None:
        with patch("appsession.main.SessionConsole", side_effect=RuntimeError("bad config")):
            assert main([]) == 1
        assert "Error: bad config" in capsys.readouterr().out
