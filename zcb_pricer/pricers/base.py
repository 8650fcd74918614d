"""Base pricer abstract class."""

from __future__ import annotations

from abc import ABC, abstractmethod

from zcb_pricer.products.bond import BondQuote


class BasePricer(ABC):
    """Abstract base class for quote pricers.

    Subclasses fill in the derived price of a quote from its inputs.
    """

    @abstractmethod
    def compute_price(self, quote: BondQuote) -> BondQuote:
        """Set quote.price from the quote inputs and return the quote."""
        ...
