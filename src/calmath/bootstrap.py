from __future__ import annotations
from calmath.core.registry import CalendarRegistry
from calmath.engines.specs import ALL_SPECS
from calmath.engines.factory import make_calendar

def build_registry() -> CalendarRegistry:
    reg = CalendarRegistry({})
    for name, spec in ALL_SPECS.items():
        reg.register(name, make_calendar(spec), meta=spec.meta)
    return reg
