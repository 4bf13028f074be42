from __future__ import annotations

from typing import Any, Dict, List, Optional, Union

from .core.registry import CalendarRegistry
from .core.types import Calendar, CalendarSpec
from .engines.arithmetic import days_in_year, resolve_month, resolve_year, year_length
from .engines.factory import make_calendar
from .engines.leap_rules import describe_rule

_registry: Optional[CalendarRegistry] = None

def set_registry(reg: CalendarRegistry) -> None:
    global _registry
    _registry = reg

def _reg() -> CalendarRegistry:
    if _registry is None:
        raise RuntimeError("Calendar registry not initialized")
    return _registry

def list_calendars() -> List[str]:
    return _reg().list()

def get_calendar(name: str) -> Calendar:
    return _reg().get(name)

def register_calendar(
    name: str,
    calendar: Union[Calendar, CalendarSpec],
    *,
    meta: Optional[Dict[str, Any]] = None,
    overwrite: bool = False,
) -> Calendar:
    """Register a live Calendar, or build one from a spec (whose meta is used unless `meta` is given)."""
    if isinstance(calendar, CalendarSpec):
        if meta is None:
            meta = calendar.meta
        calendar = make_calendar(calendar)
    _reg().register(name, calendar, meta=meta, overwrite=overwrite)
    return calendar

def calendar_info(name: str) -> Dict[str, Any]:
    cal = _reg().get(name)
    return {
        "name": name,
        "days_in_normal_year": days_in_year(cal.normal_year),
        "days_in_leap_year": days_in_year(cal.leap_year),
        "months_in_normal_year": len(cal.normal_year.months),
        "months_in_leap_year": len(cal.leap_year.months),
        "leap_rule": describe_rule(cal.is_leap_year),
        "meta": _reg().meta(name),
    }

def locate(days_from_origin: int, *, calendar: str = "minimal") -> Dict[str, Any]:
    """Year and (approximate) month index for a day offset on a named calendar."""
    cal = _reg().get(calendar)
    year = resolve_year(cal, days_from_origin)
    return {
        "calendar": calendar,
        "days_from_origin": days_from_origin,
        "year": year,
        "is_leap_year": bool(cal.is_leap_year(year)),
        "year_length": year_length(cal, year),
        "month": resolve_month(cal, days_from_origin),
    }
