"""Logging utilities for the puzzle engine and its command line."""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

ENGINE_LOGGER = "lexipuzzle"


def configure_logging(level: int = logging.INFO, stream: Optional[TextIO] = None) -> None:
    """Configure root logging with a compact formatter.

    Placement attempts are logged at DEBUG, one summary line per generated
    layout at INFO. Records go to stderr so rendered pages on stdout stay
    clean when piped.
    """

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(
        logging.Formatter(
            fmt="%(asctime)s | %(levelname)-7s | %(name)s | %(message)s",
            datefmt="%H:%M:%S",
        )
    )

    root = logging.getLogger()
    root.handlers.clear()
    root.addHandler(handler)
    root.setLevel(level)


def get_logger(name: Optional[str] = None) -> logging.Logger:
    """Return a namespaced logger, configuring defaults if needed."""

    if not logging.getLogger().handlers:
        configure_logging()
    return logging.getLogger(name or ENGINE_LOGGER)
