"""Logging for the linkkeeper command line.

Commands call :func:`configure_logging` before doing any work. ``--debug``
passes ``logging.DEBUG`` so the per-page lines of a build show up; otherwise
the level comes from ``LINKKEEPER_LOG_LEVEL`` (INFO when unset).
"""

from __future__ import annotations

import logging
import os
from typing import Final

from rich.console import Console
from rich.logging import RichHandler

__all__ = ["configure_logging", "console", "resolve_level"]

LOG_LEVEL_ENV: Final[str] = "LINKKEEPER_LOG_LEVEL"

console = Console()

_handler: RichHandler | None = None


def resolve_level(level: int | None = None) -> int:
    """Return ``level`` if given, else the level named by ``LINKKEEPER_LOG_LEVEL``.

    Unknown names fall back to INFO.
    """
    if level is not None:
        return level
    name = os.getenv(LOG_LEVEL_ENV, "INFO").strip().upper()
    resolved = logging.getLevelName(name)
    return resolved if isinstance(resolved, int) else logging.INFO


def configure_logging(level: int | None = None) -> int:
    """Route log records through a single Rich handler on the root logger.

    Repeated calls only adjust the level. Returns the level in effect.
    """
    global _handler  # noqa: PLW0603

    root_logger = logging.getLogger()
    if _handler is None or _handler not in root_logger.handlers:
        _handler = RichHandler(console=console, rich_tracebacks=True, show_path=False)
        _handler.setFormatter(logging.Formatter("%(message)s"))
        root_logger.handlers.clear()
        root_logger.addHandler(_handler)
        logging.captureWarnings(True)

    effective = resolve_level(level)
    root_logger.setLevel(effective)
    return effective
