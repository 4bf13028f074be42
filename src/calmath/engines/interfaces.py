"""
calmath.engines.interfaces
--------------------------
Strategy boundary for leap-year classification.

A Calendar only needs a callable int -> bool. The stock rules in
`leap_rules` additionally carry a human-readable description.
"""

from __future__ import annotations

from typing import Protocol


class LeapRule(Protocol):
    def __call__(self, year_index: int) -> bool:
        """True when the year at `year_index` uses the leap-year template."""
        ...

    def describe(self) -> str:
        ...
