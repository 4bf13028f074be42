from __future__ import annotations

from typing import Dict

from ..core.types import CalendarSpec, Month, Week, Year
from .leap_rules import every, never


def uniform_month(weeks: int, days_per_week: int) -> Month:
    return Month(tuple(Week(days_per_week) for _ in range(weeks)))


def uniform_year(months: int, weeks: int, days_per_week: int) -> Year:
    return Year(tuple(uniform_month(weeks, days_per_week) for _ in range(months)))


# ============================================================
# MINIMAL
# ============================================================

# 3 months x 3 weeks x 10 days = 90 days; the leap year is a single day.
MINIMAL_NORMAL = uniform_year(3, 3, 10)
MINIMAL_LEAP = Year((Month((Week(1),)),))

MINIMAL = CalendarSpec(
    name="minimal",
    normal_year=MINIMAL_NORMAL,
    leap_year=MINIMAL_LEAP,
    leap_rule=every(4),
    meta={"description": "90-day year, 1-day leap year every 4th year"},
)

MINIMAL_NO_LEAP = CalendarSpec(
    name="minimal-no-leap",
    normal_year=MINIMAL_NORMAL,
    leap_year=MINIMAL_LEAP,
    leap_rule=never(),
    meta={"description": "90-day year, never leap"},
)


# ============================================================
# DECIMAL
# ============================================================

# Ten 36-day months of six 6-day weeks, plus a short closing month.
_DECIMAL_MONTHS = tuple(uniform_month(6, 6) for _ in range(10))

DECIMAL = CalendarSpec(
    name="decimal",
    normal_year=Year(_DECIMAL_MONTHS + (Month((Week(5),)),)),
    leap_year=Year(_DECIMAL_MONTHS + (Month((Week(6),)),)),
    leap_rule=every(4),
    meta={"description": "365/366-day year of 6-day weeks"},
)


ALL_SPECS: Dict[str, CalendarSpec] = {s.name: s for s in (MINIMAL, MINIMAL_NO_LEAP, DECIMAL)}
