"""
calmath.engines.factory
-----------------------
Transforms pure data specifications into live Calendar objects.
"""

from __future__ import annotations

from ..core.shapes import year_from_obj
from ..core.types import Calendar, CalendarSpec


def make_calendar(spec: CalendarSpec) -> Calendar:
    """Validates both year templates and binds them to the spec's leap rule."""
    if not callable(spec.leap_rule):
        raise TypeError(f"Leap rule of '{spec.name}' is not callable: {spec.leap_rule!r}")
    return Calendar(
        normal_year=year_from_obj(spec.normal_year),
        leap_year=year_from_obj(spec.leap_year),
        is_leap_year=spec.leap_rule,
    )
