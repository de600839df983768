"""Interactive runtime for exercising a session tracker."""

from appsession.runtime.console import SessionConsole

__all__ = ["SessionConsole"]
