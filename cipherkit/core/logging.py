"""
Logging setup.

All modules log through ``logging.getLogger(__name__)``; this installs a
single Rich console handler on the package logger.
"""

import logging

from rich.console import Console
from rich.logging import RichHandler

PACKAGE_LOGGER = "cipherkit"


def configure_logging(level: str = "INFO") -> logging.Logger:
    """
    Attach a Rich console handler to the package logger.

    Calling this more than once only updates the level.

    Args:
        level: Minimum severity name (DEBUG, INFO, WARNING, ERROR)

    Returns:
        The package logger
    """
    logger = logging.getLogger(PACKAGE_LOGGER)
    logger.setLevel(getattr(logging, level.upper(), logging.INFO))

    if not any(isinstance(h, RichHandler) for h in logger.handlers):
        handler = RichHandler(
            console=Console(stderr=True),
            show_path=False,
            show_time=True,
            rich_tracebacks=True,
            markup=False,
        )
        logger.addHandler(handler)
        logger.propagate = False

    return logger
