from __future__ import annotations
"""Logging helpers – one package logger plus a Rich handler for the CLI.

Library code only ever talks to ``log``; :func:`setup` installs the
``RichHandler`` and is called by the CLI (or by an application that wants
the same pretty output).
"""
from logging import Logger, getLogger, INFO, DEBUG, WARNING, ERROR, basicConfig

from rich.console import Console
from rich.logging import RichHandler

console = Console()

__all__ = ["console", "get", "log", "setup", "LEVELS"]

LEVELS = {
    "info": INFO,
    "debug": DEBUG,
    "warning": WARNING,
    "error": ERROR,
}

log: Logger = getLogger("operette")


def get(level: str = "info") -> Logger:  # noqa: D401
    """Return the package logger set to *level* (str)."""
    lvl = LEVELS.get(level.lower(), INFO)
    lg = getLogger("operette")
    lg.setLevel(lvl)
    return lg


def setup(level: str = "info") -> Logger:  # noqa: D401
    """Route log records through Rich and return the package logger."""
    basicConfig(
        level=LEVELS.get(level.lower(), INFO),
        format="%(message)s",
        datefmt="%H:%M:%S",
        handlers=[RichHandler(console=console, rich_tracebacks=True, markup=False)],
        force=True,
    )
    return get(level)
