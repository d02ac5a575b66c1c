"""
Single-day state transition for HONORCAST forecasts.

A day runs in this order:
1. Play the planned games (expected marks and honor)
2. Turn in surplus marks above the reserve
3. Collect the daily quest
4. Apply any observed end-of-day overrides
"""

from datetime import date
from typing import Optional

from honorcast.config.schema import ForecastConfig
from honorcast.engine.rewards import (
    active_phase,
    expected_honor_per_game,
    expected_marks_per_game,
)
from honorcast.engine.turnins import compute_turn_in_sets, turn_in_terms
from honorcast.models.overrides import DayOverrides
from honorcast.models.results import DayResult


def simulate_day(
    day_index: int,
    day: date,
    honor_start: float,
    marks_start: float,
    config: ForecastConfig,
    games_planned: float,
    overrides: Optional[DayOverrides] = None,
    phase: Optional[str] = None,
) -> DayResult:
    """Compute the result for a single day.

    Args:
        day_index: 1-based forecast day
        day: Calendar date
        honor_start: Honor at the start of the day
        marks_start: Marks at the start of the day (tracked units)
        config: Forecast configuration
        games_planned: Games played this day
        overrides: Observed end-of-day values, if any
        phase: Active phase (derived from the date if None)

    Returns:
        DayResult for the day
    """
    phase = phase or active_phase(config, day)
    phase_config = config.phase_config(phase)
    terms = turn_in_terms(config, phase)
    marks = config.marks
    rewards = config.rewards

    # Marks
    expected_marks_gained = (
        games_planned
        * expected_marks_per_game(config.win_rate, marks.marks_per_win, marks.marks_per_loss)
        / terms.lane_divisor
    )
    marks_before_turn_in = marks_start + expected_marks_gained
    turn_in_sets = compute_turn_in_sets(
        marks_before_turn_in,
        terms.reserve,
        terms.bundle_size,
        marks.enable_turn_ins,
    )
    marks_after_turn_in = marks_before_turn_in - turn_in_sets * terms.bundle_size

    # Honor
    honor_from_bgs = (
        games_planned
        * expected_honor_per_game(config, config.win_rate, phase)
        * rewards.bg_honor_mult
    )
    honor_from_daily_quest = phase_config.daily_quest_honor * rewards.quest_honor_mult
    honor_from_turn_ins = (
        turn_in_sets * phase_config.turn_in_honor * rewards.quest_honor_mult
    )
    total_honor_gained = honor_from_bgs + honor_from_daily_quest + honor_from_turn_ins
    honor_end_of_day = honor_start + total_honor_gained

    override_applied = False
    if overrides is not None:
        if overrides.actual_honor_end_of_day is not None:
            honor_end_of_day = overrides.actual_honor_end_of_day
            override_applied = True
        if overrides.actual_marks_end_of_day is not None:
            marks_after_turn_in = overrides.actual_marks_end_of_day
            override_applied = True

    return DayResult(
        day_index=day_index,
        date=day,
        phase=phase,
        games_planned=games_planned,
        honor_start=honor_start,
        marks_start=marks_start,
        expected_marks_gained=expected_marks_gained,
        marks_before_turn_in=marks_before_turn_in,
        marks_reserve=terms.reserve,
        turn_in_sets=turn_in_sets,
        marks_after_turn_in=marks_after_turn_in,
        honor_from_bgs=honor_from_bgs,
        honor_from_daily_quest=honor_from_daily_quest,
        honor_from_turn_ins=honor_from_turn_ins,
        total_honor_gained=total_honor_gained,
        honor_end_of_day=honor_end_of_day,
        override_applied=override_applied,
    )
