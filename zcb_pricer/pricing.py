"""
Pricing entrypoint.

`run()` is the whole interactive program: read the three inputs, price the
bond, print the report. `price_quote()` is the non-interactive shortcut for
library callers who already have the numbers.
"""

from __future__ import annotations

import sys
from typing import Optional, TextIO

from zcb_pricer.config import PricerConfig
from zcb_pricer.pricers.bond_pricer import compute_price
from zcb_pricer.products.bond import BondQuote
from zcb_pricer.serialization import format_report, read_inputs


def price_quote(face_value: float, interest_rate: float, year_fraction: float) -> BondQuote:
    """Return a priced BondQuote for the given inputs."""
    quote = BondQuote(
        face_value=face_value,
        interest_rate=interest_rate,
        year_fraction=year_fraction,
    )
    return compute_price(quote)


def run(
    stdin: Optional[TextIO] = None,
    stdout: Optional[TextIO] = None,
    config: Optional[PricerConfig] = None,
) -> BondQuote:
    """Input -> compute -> output, once. InputParseError propagates to the caller."""
    stdout = stdout if stdout is not None else sys.stdout
    config = config or PricerConfig()
    quote = read_inputs(BondQuote(), stdin=stdin, stdout=stdout, config=config)
    compute_price(quote)
    stdout.write(format_report(quote, precision=config.precision))
    stdout.flush()
    return quote
