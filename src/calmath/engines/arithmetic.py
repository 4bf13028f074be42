"""
calmath.engines.arithmetic
--------------------------
Day-count arithmetic over nested Week/Month/Year templates.

Maps a signed day offset from the origin (day 0) to a 0-indexed year and
month. All functions are pure: they never mutate their inputs.
"""

from __future__ import annotations

from typing import Any

from ..core.errors import InvalidShapeError, NonTerminatingScanError
from ..core.shapes import days_of, months_of, weeks_of
from ..core.types import Calendar, SpecificDate

MAX_EMPTY_YEARS = 10_000


def days_in_month(month: Any) -> int:
    return sum(days_of(w) for w in weeks_of(month))


def days_in_year(year: Any) -> int:
    return sum(days_in_month(m) for m in months_of(year))


def year_length(calendar: Calendar, year_index: int) -> int:
    """Length in days of the year at `year_index`, per the leap predicate."""
    if calendar.is_leap_year(year_index):
        return days_in_year(calendar.leap_year)
    return days_in_year(calendar.normal_year)


def resolve_year(calendar: Calendar, days_from_origin: int, *, max_empty_years: int = MAX_EMPTY_YEARS) -> int:
    """
    Year index containing `days_from_origin`.

    Forward: years 0, 1, 2, ... are laid end to end from day 0; offset 0 is
    in year 0.

    Backward: the walk starts at year 0 and steps down one index at a time,
    each step crossing the span of the year it leaves. Day -1 is in year -1.

    A run of more than `max_empty_years` consecutive zero-length years
    raises NonTerminatingScanError.
    """
    normal = days_in_year(calendar.normal_year)
    leap = days_in_year(calendar.leap_year)

    def span(y: int) -> int:
        return leap if calendar.is_leap_year(y) else normal

    traversed = 0
    empty_run = 0
    y = 0

    if days_from_origin >= 0:
        while True:
            n = span(y)
            if traversed + n > days_from_origin:
                return y
            empty_run = empty_run + 1 if n == 0 else 0
            if empty_run > max_empty_years:
                raise NonTerminatingScanError(f"More than {max_empty_years} consecutive empty years from year {y - empty_run + 1}")
            traversed += n
            y += 1

    target = -days_from_origin
    while True:
        n = span(y)
        y -= 1
        if traversed + n >= target:
            return y
        empty_run = empty_run + 1 if n == 0 else 0
        if empty_run > max_empty_years:
            raise NonTerminatingScanError(f"More than {max_empty_years} consecutive empty years down from year {y + empty_run}")
        traversed += n


def resolve_month(calendar: Calendar, days_from_origin: int) -> int:
    """
    Approximate 0-indexed month: offset mod normal-year length, then mod the
    number of months. Leap years are not consulted.

    Floor modulo: negative offsets give an index in [0, months), e.g. -1 -> 2
    on a 90-day, 3-month year, not the truncated -1.
    """
    months = months_of(calendar.normal_year)
    days = days_in_year(calendar.normal_year)
    if days == 0 or len(months) == 0:
        raise InvalidShapeError("Normal year has no days; month index is undefined")
    return (days_from_origin % days) % len(months)


def build_specific_date() -> SpecificDate:
    # Placeholder until week/day resolution exists.
    return SpecificDate(year=0, month=0, week=0, day=0)
