"""Main entry point for Appsession."""

import argparse
import sys
from pathlib import Path

from appsession.runtime.console import SessionConsole


def main(argv: list[str] | None = None) -> int:
    """Main entry point.

    Args:
        argv: Command line arguments (defaults to sys.argv).

    Returns:
        Exit code (0 for success).
    """
    parser = argparse.ArgumentParser(
        description="Appsession - a client-side session that times out on inactivity"
    )
    parser.add_argument(
        "--config",
        "-c",
        type=Path,
        default=Path("config/default.yaml"),
        help="Path to configuration file (default: config/default.yaml)",
    )
    parser.add_argument(
        "--timeout-ms",
        "-t",
        type=float,
        default=None,
        help="Session timeout in milliseconds, 0 to never time out (overrides config)",
    )
    parser.add_argument(
        "--version",
        "-v",
        action="store_true",
        help="Show version and exit",
    )

    args = parser.parse_args(argv)

    if args.version:
        from appsession import __version__

        print(f"Appsession v{__version__}")
        return 0

    # Create and run console
    try:
        console = SessionConsole(config_path=args.config, timeout_ms=args.timeout_ms)
        console.run()
    except KeyboardInterrupt:
        print("\nInterrupted by user.")
    except Exception as e:
        print(f"Error: {e}")
        return 1

    return 0


if __name__ == "__main__":
    sys.exit(main())
