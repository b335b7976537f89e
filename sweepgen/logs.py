"""Logging setup for SweepGen.

All log output goes to stderr; stdout carries the JSON results only.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

LOGGER_NAME = "sweepgen"


def setup_logging(verbose: bool = False) -> logging.Logger:
    """Configure the ``sweepgen`` logger.

    Safe to call more than once; the handler is only added the first time.

    Args:
        verbose: Log at DEBUG instead of WARNING.
    """
    logger = logging.getLogger(LOGGER_NAME)
    logger.setLevel(logging.DEBUG if verbose else logging.WARNING)
    logger.propagate = False

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            rich_tracebacks=False,
        )
        handler.setFormatter(logging.Formatter("%(message)s"))
        logger.addHandler(handler)

    return logger
