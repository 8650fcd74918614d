"""
Text serialization for BondQuote: interactive reading and report rendering.

The prompt and report labels follow the calculator's fixed console layout
exactly, including the uneven spacing in the prompts.
"""

from __future__ import annotations

import logging
import math
import re
import sys
from typing import Optional, TextIO

from zcb_pricer.config import DEFAULT_PRECISION, MIN_PRECISION, PricerConfig
from zcb_pricer.errors import InputParseError
from zcb_pricer.products.bond import BondQuote

logger = logging.getLogger(__name__)

# (attribute, prompt, report label), in prompt order.
FIELDS: list[tuple[str, str, str]] = [
    ("face_value", "Face Value : ", "Face Value"),
    ("interest_rate", "Interest Rate  :", "Interest Rate"),
    ("year_fraction", "Year Fraction :", "Year Fraction"),
]

SEPARATOR = "============="

# Plain ASCII decimal literal: optional sign, digits with an optional point,
# optional exponent. No underscores, no non-ASCII digits, no inf/nan words.
_REAL_RE = re.compile(r"[+-]?(\d+\.?\d*|\.\d+)([eE][+-]?\d+)?", re.ASCII)


def parse_real(text: str, field: str) -> float:
    """Parse one line of input as a finite real number; raise InputParseError otherwise."""
    stripped = text.strip()
    if not _REAL_RE.fullmatch(stripped):
        raise InputParseError(field, text)
    try:
        value = float(stripped)
    except ValueError:
        raise InputParseError(field, text) from None
    if not math.isfinite(value):
        raise InputParseError(field, text)
    return value


def _read_field(
    label: str,
    prompt: str,
    stdin: TextIO,
    stdout: TextIO,
    attempts: int,
) -> float:
    """Prompt for one field, re-prompting up to `attempts` times on bad input."""
    attempt = 1
    while True:
        stdout.write(prompt)
        stdout.flush()
        line = stdin.readline()
        if not line:
            # End of input: nothing left to retry with.
            raise InputParseError(label, line, reason="unexpected end of input")
        try:
            return parse_real(line, label)
        except InputParseError as exc:
            if attempt == attempts:
                raise
            logger.warning("%s (attempt %d of %d)", exc.message, attempt, attempts)
            stdout.write("Invalid number, try again.\n")
            attempt += 1


def read_inputs(
    quote: BondQuote,
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    config: Optional[PricerConfig] = None,
) -> BondQuote:
    """
    Prompt for face value, interest rate and year fraction and store them on `quote`.

    Reads one line per field from `stdin` (default sys.stdin) and writes the
    prompts to `stdout` (default sys.stdout). Any previously computed price is
    cleared, since it no longer matches the inputs.
    """
    stdin = stdin if stdin is not None else sys.stdin
    stdout = stdout if stdout is not None else sys.stdout
    config = config or PricerConfig()
    values: dict[str, float] = {}
    for attr, prompt, label in FIELDS:
        values[attr] = _read_field(
            label, prompt, stdin, stdout, config.attempts_per_field
        )
        logger.debug("read %s = %r", attr, values[attr])
    quote.face_value = values["face_value"]
    quote.interest_rate = values["interest_rate"]
    quote.year_fraction = values["year_fraction"]
    quote.price = None
    return quote


def _fmt(value: float, precision: int) -> str:
    return format(value, f".{precision}g")


def format_report(quote: BondQuote, precision: int = DEFAULT_PRECISION) -> str:
    """
    Render the quote in the fixed report layout:

        Face Value : <value>
        Interest Rate : <value>
        Year Fraction : <value>
        =============
        Price : <value>

    Values use `precision` significant digits. Raises ValueError for an
    unpriced quote or a precision below MIN_PRECISION.
    """
    if precision < MIN_PRECISION:
        raise ValueError(f"precision must be >= {MIN_PRECISION}")
    if quote.price is None:
        raise ValueError("quote has not been priced; call compute_price first")
    lines = [
        f"{label} : {_fmt(getattr(quote, attr), precision)}"
        for attr, _prompt, label in FIELDS
    ]
    lines.append(SEPARATOR)
    lines.append(f"Price : {_fmt(quote.price, precision)}")
    return "\n".join(lines) + "\n"
