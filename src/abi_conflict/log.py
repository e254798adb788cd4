"""Logging setup for the command line."""
from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

__all__ = ["LOGGER_NAME", "configure_logging"]

LOGGER_NAME = "abi_conflict"

_LEVELS = (logging.WARNING, logging.INFO, logging.DEBUG)


def configure_logging(verbosity: int = 0, console: Console | None = None) -> logging.Logger:
    """Route package logs through rich; ``-v`` for info, ``-vv`` for debug."""
    level = _LEVELS[min(max(verbosity, 0), len(_LEVELS) - 1)]
    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        markup=False,
        rich_tracebacks=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger = logging.getLogger(LOGGER_NAME)
    logger.handlers = [handler]
    logger.setLevel(level)
    return logger
