"""Console logger construction for CLI commands."""

from __future__ import annotations

from rich.console import Console

from ..infrastructure.logging.console_logger import ConsoleLogger

__all__ = ["create_logger"]


def create_logger(console: Console | None = None, verbosity: int = 0) -> ConsoleLogger:
    """Create a logger for one command invocation.

    Args:
        console: Rich console for output
        verbosity: Verbosity level (count of -v flags)

    Returns:
        The new logger instance
    """
    return ConsoleLogger(console, verbosity)
