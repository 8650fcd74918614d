"""Error hierarchy for the zero-coupon pricer.

Invariants:
    - Every error carries a stable `code` string, reported by the CLI
    - Input errors subclass ValueError so callers treating bad input as a
      value problem keep working
    - The pricing formula itself never raises; only input acquisition does
"""

from __future__ import annotations

from typing import Optional


class PricerError(Exception):
    """Base exception for all pricer errors."""

    code = "pricer_error"

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InputParseError(PricerError, ValueError):
    """A prompted field could not be parsed as a finite real number."""

    code = "input_parse_error"

    def __init__(self, field: str, text: str, reason: Optional[str] = None) -> None:
        self.field = field
        self.text = text
        if reason is None:
            reason = f"cannot parse {text!r} as a real number"
        super().__init__(f"{field}: {reason}")


ParseError = InputParseError
