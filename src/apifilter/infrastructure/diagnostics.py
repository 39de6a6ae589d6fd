"""Console diagnostics for the apifilter logger.

The library only emits records through module loggers under "apifilter".
Handlers are opt-in: call configure_logging() from an interactive session.
"""

from __future__ import annotations

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "apifilter"


def configure_logging(level: int | str = logging.WARNING, console: Console | None = None) -> RichHandler:
    """Attach a rich handler to the apifilter logger.

    Replaces a handler installed by a previous call, never stacks them.

    Args:
        level: Logging level for the apifilter logger.
        console: Target console. None = rich default (stderr).

    Returns:
        The installed handler.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(console=console or Console(stderr=True), show_path=False)
    logger.addHandler(handler)
    logger.setLevel(level)
    return handler
