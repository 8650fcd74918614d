"""Zero-coupon bond quote (data only; pricing via BondPricer)."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional


@dataclass
class BondQuote:
    """
    Zero-coupon bond quote: face value redeemed at maturity, discounted
    continuously at `interest_rate` over `year_fraction` years.

    `price` is derived and stays None until BondPricer.compute_price runs;
    after that it equals face_value * exp(-interest_rate * year_fraction).
    """

    face_value: float = 0.0
    interest_rate: float = 0.0
    year_fraction: float = 0.0
    price: Optional[float] = None

    @property
    def is_priced(self) -> bool:
        return self.price is not None
