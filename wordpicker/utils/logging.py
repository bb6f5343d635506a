"""Logging configuration for wordpicker."""

import sys

from loguru import logger


def setup_logger(verbose: bool = False, debug: bool = False) -> None:
    """Configure the loguru logger for command line use.

    Removes loguru's default handler and installs a single stderr sink.

    Args:
        verbose: Show INFO messages
        debug: Show DEBUG messages (per-word traces)
    """
    logger.remove()

    if debug:
        level = "DEBUG"
    elif verbose:
        level = "INFO"
    else:
        level = "WARNING"

    logger.add(
        sys.stderr,
        level=level,
        format="<level>{message}</level>",
        colorize=True,
    )
