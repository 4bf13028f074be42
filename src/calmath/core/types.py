from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Callable, Dict, Tuple

from .errors import InvalidShapeError

@dataclass(frozen=True)
class Week:
    number_of_days: int

    def __post_init__(self) -> None:
        if isinstance(self.number_of_days, bool) or not isinstance(self.number_of_days, int):
            raise InvalidShapeError(f"number_of_days must be an int, got {type(self.number_of_days).__name__}")
        if self.number_of_days < 0:
            raise InvalidShapeError(f"number_of_days must be non-negative, got {self.number_of_days}")

@dataclass(frozen=True)
class Month:
    weeks: Tuple[Week, ...] = ()

@dataclass(frozen=True)
class Year:
    months: Tuple[Month, ...] = ()

@dataclass(frozen=True)
class Calendar:
    """Two year templates plus the predicate choosing between them."""
    normal_year: Year
    leap_year: Year
    is_leap_year: Callable[[int], bool]

@dataclass(frozen=True)
class SpecificDate:
    year: int = 0
    month: int = 0
    week: int = 0
    day: int = 0

@dataclass(frozen=True)
class CalendarSpec:
    """Pure data payload for constructing a named Calendar."""
    name: str
    normal_year: Year
    leap_year: Year
    leap_rule: Any  # LeapRule
    meta: Dict[str, Any] = field(default_factory=dict)
