"""Logging helpers.

The library itself only creates loggers. Handlers are installed by the CLI
through configure_logging().
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

_configured = False


def configure_logging(level: str | int = "WARNING", console: Console | None = None) -> None:
    """Route svg_serializer log records to a RichHandler on stderr.

    Calling it again only changes the level.
    """
    global _configured

    if isinstance(level, str):
        level = level.upper()
    root = logging.getLogger("svg_serializer")
    root.setLevel(level)

    if _configured:
        return

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        markup=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    root.addHandler(handler)
    _configured = True
