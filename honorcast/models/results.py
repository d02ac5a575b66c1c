"""
Result models for HONORCAST forecasts.

A forecast is an ordered list of DayResult records, one per day. Each
record carries the start and end state for the day and a breakdown of
where the honor came from.
"""

from datetime import date

from pydantic import BaseModel, ConfigDict, Field


class DayResult(BaseModel):
    """Computed state for a single forecast day."""

    model_config = ConfigDict(frozen=True)

    day_index: int = Field(ge=1, description="1-based forecast day")
    date: date
    phase: str = Field(description="Phase active on this day")

    # Inputs for the day
    games_planned: float
    honor_start: float
    marks_start: float

    # Marks
    expected_marks_gained: float
    marks_before_turn_in: float
    marks_reserve: float = Field(description="Marks kept back from turn-ins")
    turn_in_sets: int = Field(description="0 when turn-ins are disabled")
    marks_after_turn_in: float

    # Honor
    honor_from_bgs: float
    honor_from_daily_quest: float
    honor_from_turn_ins: float
    total_honor_gained: float
    honor_end_of_day: float

    # Metadata
    override_applied: bool = False
    is_goal_reached_day: bool = False

    def mark_goal_reached(self) -> "DayResult":
        """Return a copy flagged as the first day at or above target."""
        return self.model_copy(update={"is_goal_reached_day": True})
