"""Logging setup for command-line use."""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "vercmp"


def configure_logging(level: str | int, console: Console | None = None) -> None:
    """Attach a rich handler to the vercmp logger.

    Calling this again replaces the previously installed handler. The
    library itself never calls it.

    Args:
        level: Logging level name or number.
        console: Console to log to. Defaults to stderr.
    """
    logger = logging.getLogger(LOGGER_NAME)
    for handler in list(logger.handlers):
        if isinstance(handler, RichHandler):
            logger.removeHandler(handler)

    handler = RichHandler(
        console=console or Console(stderr=True),
        show_path=False,
        show_time=False,
    )
    handler.setFormatter(logging.Formatter("%(message)s"))
    logger.addHandler(handler)
    logger.setLevel(level)
