"""
Pricer configuration.

Settings are plain values with defaults that reproduce the baseline program:
no retry on bad input and a report precision that round-trips a double.
The CLI builds a PricerConfig from its flags; library callers construct one
directly. There is no environment or file-based configuration.
"""

from __future__ import annotations

import argparse
from dataclasses import dataclass

DEFAULT_PRECISION = 17
# Smallest accepted report precision. 17 significant digits round-trip any
# double exactly; fewer may not.
MIN_PRECISION = 15

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class PricerConfig:
    """
    Runtime settings for one pricing run.

    - `precision`: significant digits used by format_report.
    - `retry_invalid`: re-prompt a field after a parse failure instead of
      raising immediately.
    - `max_attempts`: prompts per field when retrying (1 = no retry).
    - `log_level`: threshold for diagnostics written to stderr.
    """

    precision: int = DEFAULT_PRECISION
    retry_invalid: bool = False
    max_attempts: int = 3
    log_level: str = "WARNING"

    def __post_init__(self) -> None:
        self._validate()

    def _validate(self) -> None:
        if self.precision < MIN_PRECISION:
            raise ValueError(f"precision must be >= {MIN_PRECISION}")
        if self.max_attempts < 1:
            raise ValueError("max_attempts must be >= 1")
        self.log_level = self.log_level.upper()
        if self.log_level not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")

    @property
    def attempts_per_field(self) -> int:
        """Number of prompts allowed for each field."""
        return self.max_attempts if self.retry_invalid else 1

    @classmethod
    def from_args(cls, args: argparse.Namespace) -> "PricerConfig":
        """Build config from parsed CLI arguments."""
        return cls(
            precision=args.precision,
            retry_invalid=args.retry,
            max_attempts=args.max_attempts,
            log_level=args.log_level,
        )
