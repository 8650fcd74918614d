"""Pricer implementations."""

from zcb_pricer.pricers.base import BasePricer
from zcb_pricer.pricers.bond_pricer import BondPricer, compute_price

__all__ = ["BasePricer", "BondPricer", "compute_price"]
