"""
calmath.core.shapes
-------------------
Runtime shape checks for Week/Month/Year values.

The arithmetic layer reads structures through the accessors here, so a
dataclass and a plain mapping (e.g. decoded JSON) fail in exactly the same way.
"""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from typing import Any, Tuple

from .errors import InvalidShapeError
from .types import Month, Week, Year

_DAY_KEYS = ("number_of_days", "numberOfDays")


def _field(obj: Any, key: str, kind: str) -> Any:
    if isinstance(obj, Mapping):
        if key not in obj:
            raise InvalidShapeError(f"{kind} mapping has no '{key}' key")
        return obj[key]
    if isinstance(obj, (str, bytes, bool)) or obj is None:
        raise InvalidShapeError(f"Expected a {kind}, got {type(obj).__name__}")
    try:
        return getattr(obj, key)
    except AttributeError:
        raise InvalidShapeError(f"Expected a {kind}, got {type(obj).__name__} without '{key}'") from None


def _items(obj: Any, key: str, kind: str) -> Sequence[Any]:
    items = _field(obj, key, kind)
    if isinstance(items, (str, bytes, Mapping)) or not isinstance(items, Sequence):
        raise InvalidShapeError(f"{kind}.{key} must be an ordered sequence, got {type(items).__name__}")
    return items


def weeks_of(month: Any) -> Sequence[Any]:
    return _items(month, "weeks", "Month")


def months_of(year: Any) -> Sequence[Any]:
    return _items(year, "months", "Year")


def days_of(week: Any) -> int:
    """Day count of a single week; must be a non-negative int (bool excluded)."""
    if isinstance(week, Week):
        return week.number_of_days
    if isinstance(week, Mapping):
        key = next((k for k in _DAY_KEYS if k in week), _DAY_KEYS[0])
        n = _field(week, key, "Week")
    else:
        n = _field(week, "number_of_days", "Week")
    if isinstance(n, bool) or not isinstance(n, int):
        raise InvalidShapeError(f"Week.number_of_days must be an int, got {type(n).__name__}")
    if n < 0:
        raise InvalidShapeError(f"Week.number_of_days must be non-negative, got {n}")
    return n


# ============================================================
# Builders (trust boundary)
# ============================================================

def week_from_obj(obj: Any) -> Week:
    return Week(days_of(obj))


def month_from_obj(obj: Any) -> Month:
    weeks: Tuple[Week, ...] = tuple(week_from_obj(w) for w in weeks_of(obj))
    return Month(weeks)


def year_from_obj(obj: Any) -> Year:
    """Build a Year from a Year or a nested mapping like {"months": [{"weeks": [...]}]}."""
    return Year(tuple(month_from_obj(m) for m in months_of(obj)))
