"""Logging configuration for the command-line entry point.

Diagnostics go to stderr so the report on stdout keeps its exact layout.
Library modules only create loggers; configuring handlers is left to the CLI.
"""

from __future__ import annotations

import logging
import sys
from typing import Optional, TextIO

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"


def configure_logging(level: str = "WARNING", stream: Optional[TextIO] = None) -> None:
    """Install a single stderr handler on the package logger."""
    package_logger = logging.getLogger("zcb_pricer")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)
    handler = logging.StreamHandler(stream if stream is not None else sys.stderr)
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    package_logger.addHandler(handler)
    package_logger.setLevel(level.upper())
    package_logger.propagate = False
