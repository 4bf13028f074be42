"""
calmath.engines.leap_rules
--------------------------
Stock leap-year predicates. All rules accept any integer year index,
including negative ones (floor modulo).
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Iterable, Tuple

from .interfaces import LeapRule


@dataclass(frozen=True)
class Never:
    def __call__(self, year_index: int) -> bool:
        return False

    def describe(self) -> str:
        return "no leap years"


@dataclass(frozen=True)
class Always:
    def __call__(self, year_index: int) -> bool:
        return True

    def describe(self) -> str:
        return "every year is a leap year"


@dataclass(frozen=True)
class Every:
    """Leap iff (year - offset) is a multiple of n."""
    n: int
    offset: int = 0

    def __post_init__(self) -> None:
        if self.n <= 0:
            raise ValueError("n must be positive")

    def __call__(self, year_index: int) -> bool:
        return (year_index - self.offset) % self.n == 0

    def describe(self) -> str:
        if self.offset:
            return f"every {self.n} years, offset {self.offset}"
        return f"every {self.n} years"


@dataclass(frozen=True)
class Cycle:
    """Leap pattern repeating every len(pattern) years, starting at year 0."""
    pattern: Tuple[bool, ...]

    def __post_init__(self) -> None:
        if not self.pattern:
            raise ValueError("pattern must not be empty")

    def __call__(self, year_index: int) -> bool:
        return bool(self.pattern[year_index % len(self.pattern)])

    def describe(self) -> str:
        marks = "".join("L" if p else "." for p in self.pattern)
        return f"cycle of {len(self.pattern)} years [{marks}]"


def never() -> LeapRule:
    return Never()


def always() -> LeapRule:
    return Always()


def every(n: int, offset: int = 0) -> LeapRule:
    return Every(n, offset)


def cycle(pattern: Iterable[object]) -> LeapRule:
    return Cycle(tuple(bool(p) for p in pattern))


def describe_rule(rule: Callable[[int], bool]) -> str:
    """Description for stock rules; falls back to the callable's name."""
    if hasattr(rule, "describe"):
        return rule.describe()
    return getattr(rule, "__name__", repr(rule))
