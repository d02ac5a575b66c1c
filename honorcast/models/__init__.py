"""
Data models for HONORCAST.

This module contains Pydantic models for:
- Day overrides and entries supplied by the player
- Day results produced by the forecast
"""

from honorcast.models.overrides import (
    DayEntry,
    DayOverrides,
    clear_override,
    overrides_by_day,
    set_override,
)
from honorcast.models.results import DayResult

__all__ = [
    "DayEntry",
    "DayOverrides",
    "DayResult",
    "clear_override",
    "overrides_by_day",
    "set_override",
]
