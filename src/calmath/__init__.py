"""calmath public API.

Keep this surface small: users should mostly interact with functions re-exported here.
"""

# Initialize registry on import
from . import api_init as _api_init  # noqa: F401

from .api import (
    list_calendars,
    get_calendar,
    register_calendar,
    calendar_info,
    locate,
)
from .core.errors import CalmathError, InvalidShapeError, NonTerminatingScanError
from .core.shapes import month_from_obj, week_from_obj, year_from_obj
from .core.types import Calendar, CalendarSpec, Month, SpecificDate, Week, Year
from .engines.arithmetic import (
    build_specific_date,
    days_in_month,
    days_in_year,
    resolve_month,
    resolve_year,
)
from .engines.factory import make_calendar
from .engines import leap_rules

__all__ = [
    "list_calendars",
    "get_calendar",
    "register_calendar",
    "calendar_info",
    "locate",
    "CalmathError",
    "InvalidShapeError",
    "NonTerminatingScanError",
    "week_from_obj",
    "month_from_obj",
    "year_from_obj",
    "Calendar",
    "CalendarSpec",
    "Month",
    "SpecificDate",
    "Week",
    "Year",
    "build_specific_date",
    "days_in_month",
    "days_in_year",
    "resolve_month",
    "resolve_year",
    "make_calendar",
    "leap_rules",
]
