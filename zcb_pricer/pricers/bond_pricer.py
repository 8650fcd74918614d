"""Pricer for zero-coupon bonds under continuous discounting."""

from __future__ import annotations

import logging

from zcb_pricer.curves import FlatRateCurve
from zcb_pricer.interfaces import Curve
from zcb_pricer.pricers.base import BasePricer
from zcb_pricer.products.bond import BondQuote

logger = logging.getLogger(__name__)


class BondPricer(BasePricer):
    """Pricer for zero-coupon bonds: PV = face_value * DF(year_fraction)."""

    def curve_for(self, quote: BondQuote) -> Curve:
        """Flat curve at the quote's continuously compounded rate."""
        return FlatRateCurve(rate=quote.interest_rate)

    def compute_price(self, quote: BondQuote) -> BondQuote:
        """Zero-coupon bond: price = face_value * exp(-interest_rate * year_fraction)."""
        if quote.face_value == 0.0:
            # Keep 0 * inf (overflowed discount factor) from turning into nan.
            quote.price = 0.0
        else:
            df = self.curve_for(quote).df(quote.year_fraction)
            quote.price = quote.face_value * df
        logger.debug(
            "priced zero-coupon bond face=%r rate=%r t=%r -> %r",
            quote.face_value,
            quote.interest_rate,
            quote.year_fraction,
            quote.price,
        )
        return quote


_default_pricer = BondPricer()


def compute_price(quote: BondQuote) -> BondQuote:
    """Price `quote` in place with the default BondPricer and return it."""
    return _default_pricer.compute_price(quote)
