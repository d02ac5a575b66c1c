"""
Forecast planning for HONORCAST.

Ties validation, rate selection and the forecast together:
1. Validate the configuration
2. Pick the daily game count (solved in auto mode, given in manual mode)
3. Run the forecast with the player's overrides
4. Locate the goal day
"""

from dataclasses import dataclass, field
from typing import Iterable, Optional

from honorcast.config.schema import ForecastConfig, RateMode
from honorcast.engine.forecast import ForecastResult, Forecaster
from honorcast.engine.solver import is_at_ceiling, solve_required_daily_games
from honorcast.engine.turnins import turn_in_terms
from honorcast.engine.validation import ValidationResult, validate_config
from honorcast.models.overrides import DayEntry
from honorcast.models.results import DayResult


@dataclass
class PlanSummary:
    """Headline numbers for a plan."""

    total_days: int
    honor_needed: float
    progress_percent: float
    marks_reserve: float
    goal_after_deadline: bool
    unreachable: bool


@dataclass
class ForecastPlan:
    """Complete output of a planning run."""

    validation: ValidationResult
    daily_games: float = 0.0
    forecast: ForecastResult = field(default_factory=ForecastResult)

    @property
    def is_valid(self) -> bool:
        return self.validation.valid

    @property
    def results(self) -> list[DayResult]:
        return self.forecast.results

    @property
    def goal_day(self) -> Optional[DayResult]:
        return self.forecast.goal_day


def build_plan(
    config: ForecastConfig,
    entries: Iterable[DayEntry] = (),
    until_goal: Optional[bool] = None,
) -> ForecastPlan:
    """Validate, pick a rate and forecast.

    Args:
        config: Forecast configuration
        entries: Player entries with overrides
        until_goal: Force an open-ended (True) or fixed (False) horizon;
            by default manual mode is open-ended and auto mode is fixed

    Returns:
        ForecastPlan; invalid configurations yield no results and 0 games
    """
    validation = validate_config(config)
    if not validation.valid:
        return ForecastPlan(validation=validation)

    entries = list(entries)
    manual = config.rate.mode == RateMode.MANUAL
    if until_goal is None:
        until_goal = manual

    if manual:
        daily_games = config.rate.manual_games_per_day
    else:
        daily_games = solve_required_daily_games(config)

    forecaster = Forecaster(config)
    if until_goal:
        forecast = forecaster.run_until_goal(entries, daily_games)
    else:
        forecast = forecaster.run(entries, daily_games)

    return ForecastPlan(validation=validation, daily_games=daily_games, forecast=forecast)


def summarize_plan(config: ForecastConfig, plan: ForecastPlan) -> PlanSummary:
    """Derive headline numbers for display.

    Args:
        config: Configuration the plan was built from
        plan: Planning output

    Returns:
        PlanSummary
    """
    goal = config.goal
    progress = 0.0
    if goal.honor_target > 0:
        progress = min(100.0, goal.starting_honor / goal.honor_target * 100)

    goal_day = plan.goal_day
    goal_after_deadline = goal_day is not None and goal_day.date > config.timeline.end_date

    marks_reserve = 0.0
    if plan.is_valid:
        marks_reserve = turn_in_terms(config, config.timeline.phase).reserve

    unreachable = plan.is_valid and (
        goal_day is None
        or (config.rate.mode == RateMode.AUTO and is_at_ceiling(plan.daily_games, config))
    )

    return PlanSummary(
        total_days=config.timeline.total_days,
        honor_needed=goal.honor_needed,
        progress_percent=progress,
        marks_reserve=marks_reserve,
        goal_after_deadline=goal_after_deadline,
        unreachable=unreachable,
    )
