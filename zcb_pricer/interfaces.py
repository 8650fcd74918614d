"""
Protocol-based interface for the discounting seam of the pricer.

Using typing.Protocol keeps BondPricer independent of a concrete curve class:
anything exposing a `df(t)` method can discount a bond's face value.
"""

from __future__ import annotations

from typing import Protocol, runtime_checkable


@runtime_checkable
class Curve(Protocol):
    """Protocol for discount curve implementations."""

    def df(self, t: float) -> float:
        """Return discount factor to time t (year-fraction)."""
        ...
