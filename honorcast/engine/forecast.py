"""
Forecast driver for HONORCAST.

Runs the day simulator across a date range, carrying end-of-day honor and
marks forward as the next day's start values and re-anchoring on any
overrides the player has recorded.

Two horizons are supported:
- Fixed: day 1 through the configured end date (inclusive)
- Open: until the goal is reached plus a few context days, bounded by a
  hard day ceiling for unreachable targets
"""

import logging
from dataclasses import dataclass, field
from datetime import timedelta
from typing import Iterable, Iterator, Optional

from honorcast.config.schema import ForecastConfig, MarksTracking
from honorcast.engine.day import simulate_day
from honorcast.engine.rewards import active_phase
from honorcast.models.overrides import DayEntry, overrides_by_day
from honorcast.models.results import DayResult

logger = logging.getLogger(__name__)


@dataclass
class ForecastResult:
    """Ordered day results plus the daily game count used."""

    results: list[DayResult] = field(default_factory=list)
    daily_games: float = 0.0

    @property
    def goal_day(self) -> Optional[DayResult]:
        """The day flagged as first reaching the target, or None."""
        for result in self.results:
            if result.is_goal_reached_day:
                return result
        return None

    @property
    def reached(self) -> bool:
        """Check if any day reached the target."""
        return self.goal_day is not None

    @property
    def last_day(self) -> Optional[DayResult]:
        """The final day of the run, or None for an empty run."""
        return self.results[-1] if self.results else None

    @property
    def final_honor(self) -> float:
        """Honor at the end of the last day (0 for an empty run)."""
        last = self.last_day
        return last.honor_end_of_day if last else 0.0


class Forecaster:
    """Produces day-by-day forecasts for one configuration.

    Usage:
        forecaster = Forecaster(config)
        forecast = forecaster.run(entries, daily_games=12.5)
        # forecast.results holds one DayResult per day
        # forecast.goal_day is the first day at or above the target
    """

    def __init__(self, config: ForecastConfig):
        """Initialize the forecaster.

        Args:
            config: Validated forecast configuration
        """
        self.config = config

    def iter_days(
        self,
        entries: Iterable[DayEntry],
        daily_games: float,
    ) -> Iterator[DayResult]:
        """Yield day results from day 1 onwards, without an end.

        The goal flag is set on the first day whose end-of-day honor is at
        or above the target and never on any later day.

        Args:
            entries: Player entries with overrides
            daily_games: Games played each day

        Yields:
            DayResult for each successive day
        """
        config = self.config
        start = config.timeline.start_date
        target = config.goal.honor_target
        overrides = overrides_by_day(entries)

        honor = config.goal.starting_honor
        marks = config.goal.starting_marks
        previous_phase: Optional[str] = None
        goal_reached = False
        day_index = 1

        while True:
            day = start + timedelta(days=day_index - 1)
            phase = active_phase(config, day)

            if previous_phase is not None and phase != previous_phase:
                marks = self._carry_marks_across_phases(marks, previous_phase, phase)

            result = simulate_day(
                day_index,
                day,
                honor,
                marks,
                config,
                daily_games,
                overrides.get(day_index),
                phase=phase,
            )

            if not goal_reached and result.honor_end_of_day >= target:
                result = result.mark_goal_reached()
                goal_reached = True

            yield result

            honor = result.honor_end_of_day
            marks = result.marks_after_turn_in
            previous_phase = phase
            day_index += 1

    def run(self, entries: Iterable[DayEntry], daily_games: float) -> ForecastResult:
        """Forecast from the start date through the end date.

        Args:
            entries: Player entries with overrides
            daily_games: Games played each day

        Returns:
            ForecastResult with one result per day in the range
        """
        total_days = self.config.timeline.total_days
        results: list[DayResult] = []
        if total_days <= 0:
            return ForecastResult(results=results, daily_games=daily_games)

        for result in self.iter_days(entries, daily_games):
            results.append(result)
            if len(results) >= total_days:
                break

        return ForecastResult(results=results, daily_games=daily_games)

    def run_until_goal(
        self,
        entries: Iterable[DayEntry],
        daily_games: float,
    ) -> ForecastResult:
        """Forecast until the goal is reached, ignoring the end date.

        Stops ``extra_days_after_goal`` days after the goal day, or at
        ``max_days`` if the goal is never reached.

        Args:
            entries: Player entries with overrides
            daily_games: Games played each day

        Returns:
            ForecastResult for the open-ended run
        """
        rate = self.config.rate
        results: list[DayResult] = []
        goal_index: Optional[int] = None

        if rate.max_days <= 0:
            return ForecastResult(results=results, daily_games=daily_games)

        for result in self.iter_days(entries, daily_games):
            results.append(result)
            if result.is_goal_reached_day:
                goal_index = result.day_index
            if goal_index is not None and result.day_index >= goal_index + rate.extra_days_after_goal:
                break
            if result.day_index >= rate.max_days:
                logger.debug(
                    "Stopped open-ended forecast at %d days without reaching %.0f honor",
                    rate.max_days,
                    self.config.goal.honor_target,
                )
                break

        return ForecastResult(results=results, daily_games=daily_games)

    def _carry_marks_across_phases(
        self,
        marks: float,
        old_phase: str,
        new_phase: str,
    ) -> float:
        """Rescale a per-battleground mark level when the rotation changes.

        Pooled totals carry over unchanged. Per-battleground levels are
        re-spread so the pooled total is preserved.
        """
        if self.config.marks.tracking != MarksTracking.PER_BG:
            return marks
        old_count = self.config.phase_config(old_phase).num_bgs
        new_count = self.config.phase_config(new_phase).num_bgs
        if old_count <= 0 or new_count <= 0:
            return marks
        return marks * old_count / new_count


def run_forecast(
    config: ForecastConfig,
    entries: Iterable[DayEntry],
    daily_games: float,
) -> ForecastResult:
    """Run a fixed-horizon forecast.

    Convenience wrapper around ``Forecaster(config).run``.
    """
    return Forecaster(config).run(entries, daily_games)


def run_forecast_until_goal(
    config: ForecastConfig,
    entries: Iterable[DayEntry],
    daily_games: float,
) -> ForecastResult:
    """Run an open-horizon forecast."""
    return Forecaster(config).run_until_goal(entries, daily_games)


def find_goal_reached_day(
    results: Iterable[DayResult],
    honor_target: float,
) -> Optional[DayResult]:
    """Find the first day whose end-of-day honor meets the target.

    Args:
        results: Day results in order
        honor_target: Honor target

    Returns:
        The first qualifying day, or None if the target is never met
    """
    for result in results:
        if result.honor_end_of_day >= honor_target:
            return result
    return None
