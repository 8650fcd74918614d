"""Products: zero-coupon bond quote."""

from zcb_pricer.products.bond import BondQuote

__all__ = ["BondQuote"]
