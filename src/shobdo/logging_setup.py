"""Logging configuration."""

from __future__ import annotations

import logging

from rich.logging import RichHandler


def configure_logging(level: str | int = "info") -> None:
    """Route logging through a rich handler on the root logger.

    Args:
        level: Level name ("debug", "info", ...) or numeric level
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            level = logging.INFO

    root_logger = logging.getLogger()
    # Replace existing handlers to avoid duplicate output
    for handler in list(root_logger.handlers):
        root_logger.removeHandler(handler)

    handler = RichHandler(rich_tracebacks=True, show_path=False)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root_logger.addHandler(handler)
    root_logger.setLevel(level)

    # Keep httpx request lines out of normal output
    logging.getLogger("httpx").setLevel(max(level, logging.WARNING))
