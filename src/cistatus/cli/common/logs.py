"""Logging setup for the CLI.

Library modules only create loggers; handlers are installed here, once,
by the CLI entry point.
"""

from __future__ import annotations

import logging
import os

from rich.logging import RichHandler

from cistatus.cli.common.output import console

LOG_LEVEL_ENV = "CISTATUS_LOG_LEVEL"


def configure_logging(verbose: bool = False) -> None:
    """Route log records through a Rich handler.

    Args:
        verbose: Log at DEBUG instead of WARNING.

    Environment variables:
        CISTATUS_LOG_LEVEL: Explicit level name, takes precedence over
            `verbose`. Unknown names fall back to WARNING.
    """
    default = "DEBUG" if verbose else "WARNING"
    level_name = os.getenv(LOG_LEVEL_ENV, default).upper()
    level = getattr(logging, level_name, logging.WARNING)

    root_logger = logging.getLogger()
    root_logger.setLevel(level)
    root_logger.handlers.clear()

    handler = RichHandler(console=console, show_path=False, rich_tracebacks=True)
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter("%(name)s: %(message)s"))
    root_logger.addHandler(handler)
