"""
Discount curve primitive for zero-coupon pricing.

Conventions:
- Times are **year fractions** (e.g. 2.0 = 2Y from today).
- Rates are **continuously compounded** annualized rates.
- The curve is flat: a single rate applies to every maturity.

Unlike a pillar-based zero curve, this curve is total over the reals:
negative times and negative rates are accepted, since the bond formula
itself puts no restriction on its inputs.
"""

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class FlatRateCurve:
    """
    Flat continuously compounded rate curve.

    Implements the Curve protocol structurally (no explicit inheritance).
    """

    rate: float

    def df(self, t: float) -> float:
        r"""
        Discount factor to time t.

        DF(t) = exp(-r*t). An exponent too large for a double overflows to
        +inf instead of raising; a very negative one underflows to 0.0.
        """
        try:
            return math.exp(-self.rate * t)
        except OverflowError:
            return math.inf
