"""Utility functions for the mcp-tools CLI.

Shared helpers: console, version, signal handling.
"""

# ruff: noqa: E402
# Suppress pydantic logfire plugin warning (must be before any pydantic imports)
import warnings

warnings.filterwarnings("ignore", message=".*logfire.*", category=UserWarning)

import signal
import sys
from importlib.metadata import PackageNotFoundError, version

from rich.console import Console

console = Console()
err_console = Console(stderr=True)


def _get_cli_version() -> str:
    """Get installed package version.

    Falls back to "unknown" when package metadata isn't available
    (e.g. running from a source checkout without installation).
    """
    try:
        return version("mcp-tools")
    except PackageNotFoundError:
        return "unknown"


def _handle_sigint(signum, frame):
    """Handle Ctrl-C gracefully."""
    err_console.print("\n[dim]Cancelled.[/dim]")
    sys.exit(130)


# Register signal handler early to catch Ctrl-C before Click processes it
signal.signal(signal.SIGINT, _handle_sigint)
