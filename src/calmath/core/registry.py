from __future__ import annotations
from dataclasses import dataclass, field
from typing import Any, Dict, List, Optional

from .types import Calendar

@dataclass
class CalendarRegistry:
    """Named calendars, each with the metadata it was registered under."""
    _calendars: Dict[str, Calendar]
    _meta: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    def get(self, name: str) -> Calendar:
        if name not in self._calendars:
            raise KeyError(f"Unknown calendar '{name}'. Available: {sorted(self._calendars)}")
        return self._calendars[name]

    def meta(self, name: str) -> Dict[str, Any]:
        self.get(name)
        return dict(self._meta.get(name, {}))

    def list(self) -> List[str]:
        return sorted(self._calendars.keys())

    def register(
        self,
        name: str,
        calendar: Calendar,
        *,
        meta: Optional[Dict[str, Any]] = None,
        overwrite: bool = False,
    ) -> None:
        # Overwriting replaces the metadata too.
        if (not overwrite) and (name in self._calendars):
            raise KeyError(f"Calendar '{name}' already exists. Use overwrite=True to replace.")
        self._calendars[name] = calendar
        self._meta[name] = dict(meta or {})
