"""
Override models for HONORCAST forecasts.

Players record what actually happened on a day (honor and marks at the
end of the day) and the forecast re-anchors on those values from that
day onwards.
"""

import datetime
from typing import Iterable, Optional

from pydantic import BaseModel, Field


class DayOverrides(BaseModel):
    """Observed end-of-day values that replace the computed ones."""

    actual_honor_end_of_day: Optional[float] = Field(
        default=None,
        description="Observed honor at the end of the day",
    )
    actual_marks_end_of_day: Optional[float] = Field(
        default=None,
        description="Observed marks at the end of the day (pooled or per BG)",
    )

    @property
    def is_empty(self) -> bool:
        """Check if no value is overridden."""
        return (
            self.actual_honor_end_of_day is None
            and self.actual_marks_end_of_day is None
        )


class DayEntry(BaseModel):
    """A user entry for one forecast day."""

    day_index: int = Field(ge=1, description="1-based forecast day")
    date: Optional[datetime.date] = Field(default=None, description="Calendar date of the day")
    overrides: Optional[DayOverrides] = Field(default=None)


def overrides_by_day(entries: Iterable[DayEntry]) -> dict[int, DayOverrides]:
    """Build the day-indexed override lookup for one forecast run.

    Later entries for the same day replace earlier ones. Entries without
    overrides are skipped.

    Args:
        entries: Day entries in any order

    Returns:
        Map of day index to overrides
    """
    lookup: dict[int, DayOverrides] = {}
    for entry in entries:
        if entry.overrides is not None:
            lookup[entry.day_index] = entry.overrides
    return lookup


def set_override(
    entries: list[DayEntry],
    day_index: int,
    day: Optional[datetime.date],
    overrides: DayOverrides,
) -> list[DayEntry]:
    """Return a new entry list with the override for a day replaced.

    Args:
        entries: Existing entries
        day_index: Day to set
        day: Calendar date of the day
        overrides: New override values

    Returns:
        Entries sorted by day index
    """
    kept = [e for e in entries if e.day_index != day_index]
    kept.append(DayEntry(day_index=day_index, date=day, overrides=overrides))
    return sorted(kept, key=lambda e: e.day_index)


def clear_override(entries: list[DayEntry], day_index: int) -> list[DayEntry]:
    """Return a new entry list without the given day."""
    return [e for e in entries if e.day_index != day_index]
