"""Logging utilities.

Modules get their logger from ``logger(__name__)``. Handlers and format are
set once for the process by ``configure_logging``, which the CLI entry point
calls; library code never attaches handlers itself.
"""

import logging
import os

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def logger(name: str) -> logging.Logger:
    """Return the logger for a module name."""
    return logging.getLogger(name)


def configure_logging(level: str | None = None) -> None:
    """Configure root logging once for the process.

    Args:
        level: Level name; defaults to the LOG_LEVEL environment variable,
            then WARNING. Unknown names fall back to WARNING.
    """
    level_name = (level or os.getenv("LOG_LEVEL") or "WARNING").upper()
    logging.basicConfig(
        level=getattr(logging, level_name, logging.WARNING),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
    )
