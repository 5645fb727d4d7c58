"""
Logging helpers for the command-line entry point.

Library code only ever calls logging.getLogger(__name__). Handlers and
levels are configured here, once, by the CLI.
"""

from __future__ import annotations

import logging
import sys

LOG_FORMAT = "%(name)s: %(message)s"


def verbosity_to_level(verbosity: int) -> int:
    """Map -v counts to logging levels: 0 -> WARNING, 1 -> INFO, 2+ -> DEBUG."""
    if verbosity <= 0:
        return logging.WARNING
    if verbosity == 1:
        return logging.INFO
    return logging.DEBUG


def configure_logging(verbosity: int = 0) -> None:
    """
    Send log records to stderr so stdout stays clean for reports (JSON output included).
    """
    logging.basicConfig(
        level=verbosity_to_level(verbosity),
        format=LOG_FORMAT,
        stream=sys.stderr,
        force=True,
    )
