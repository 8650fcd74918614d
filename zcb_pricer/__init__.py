"""Zero-coupon bond pricer: quote record, continuous discounting, console I/O."""

from zcb_pricer.config import PricerConfig
from zcb_pricer.curves import FlatRateCurve
from zcb_pricer.errors import InputParseError, ParseError, PricerError
from zcb_pricer.interfaces import Curve
from zcb_pricer.pricers import BasePricer, BondPricer, compute_price
from zcb_pricer.pricing import price_quote, run
from zcb_pricer.products.bond import BondQuote
from zcb_pricer.serialization import format_report, parse_real, read_inputs

__all__ = [
    "BondQuote",
    "Curve",
    "FlatRateCurve",
    "BasePricer",
    "BondPricer",
    "compute_price",
    "read_inputs",
    "parse_real",
    "format_report",
    "price_quote",
    "run",
    "PricerConfig",
    "PricerError",
    "InputParseError",
    "ParseError",
]
