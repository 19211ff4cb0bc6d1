"""
Lightweight logging helpers.

Modules obtain their logger with ``logging.getLogger(__name__)`` and never
configure handlers themselves; entry points such as the CLI call
:func:`setup_logging` once.
"""

from __future__ import annotations

import logging

from rich.logging import RichHandler


def setup_logging(level: int | str = "WARNING") -> None:
    """
    Apply a minimal rich-backed logging configuration once.

    Does nothing when the root logger already has handlers, assuming the
    embedding application configured logging itself.

    Args:
        level: Level name or number for the root logger.
    """
    if isinstance(level, str):
        lvl = getattr(logging, level.upper(), logging.WARNING)
    else:
        lvl = int(level)
    root = logging.getLogger()
    if root.handlers:
        return
    logging.basicConfig(
        level=lvl,
        format="%(name)s: %(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(rich_tracebacks=True, show_path=False)],
    )


__all__ = ["setup_logging"]
