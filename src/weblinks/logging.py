"""Logging for the weblinks package.

Registry warnings and link registrations are logged on the ``weblinks``
logger. Nothing is printed unless the application configures logging or the
CLI is run with ``--verbose`` / ``WEBLINKS_LOG_LEVEL``.
"""

from __future__ import annotations

import logging
import os

from rich.console import Console
from rich.logging import RichHandler

logger = logging.getLogger("weblinks")
logger.addHandler(logging.NullHandler())


def configure_logging(verbose: bool = False) -> None:
    """Route package logs to stderr through rich for a CLI run."""
    level_name = "DEBUG" if verbose else os.getenv("WEBLINKS_LOG_LEVEL", "").strip().upper()

    # Drop the handler from a previous CLI run
    for handler in [h for h in logger.handlers if isinstance(h, RichHandler)]:
        logger.removeHandler(handler)

    if not level_name:
        logger.setLevel(logging.NOTSET)
        return

    logger.addHandler(RichHandler(console=Console(stderr=True), show_path=False))
    logger.setLevel(getattr(logging, level_name, logging.INFO))
