"""
Daily game solver for HONORCAST.

Finds the smallest constant number of games per day that reaches the
honor target by the end date. More games never produce less honor (both
battleground honor and turn-ins grow with games played), so a single
bracketing bisection is enough.
"""

import logging
import math

from honorcast.config.schema import ForecastConfig
from honorcast.engine.forecast import Forecaster

logger = logging.getLogger(__name__)


def _final_honor(forecaster: Forecaster, daily_games: float) -> float:
    """Honor at the end of the horizon with no overrides applied."""
    return forecaster.run([], daily_games).final_honor


def solve_required_daily_games(config: ForecastConfig) -> float:
    """Calculate the games per day needed to reach the target by the end date.

    Overrides are not considered; the result is the plan from day zero.

    Args:
        config: Validated forecast configuration

    Returns:
        Games per day, rounded up to one decimal place. A value at the
        solver's ``max_upper_bound`` means the target cannot be reached
        in the horizon.
    """
    target = config.goal.honor_target
    solver = config.solver

    if config.goal.starting_honor >= target:
        return 0.0

    forecaster = Forecaster(config)

    # Daily quests alone may be enough
    if _final_honor(forecaster, 0.0) >= target:
        return 0.0

    low = 0.0
    high = solver.initial_upper_bound

    while _final_honor(forecaster, high) < target and high < solver.max_upper_bound:
        high = min(high * 2, solver.max_upper_bound)
        logger.debug("Expanded daily games bracket to %.1f", high)

    iterations = 0
    while high - low > solver.tolerance:
        mid = (low + high) / 2
        if _final_honor(forecaster, mid) >= target:
            high = mid
        else:
            low = mid
        iterations += 1

    logger.debug(
        "Solved daily games in %d bisection steps: [%.3f, %.3f]",
        iterations,
        low,
        high,
    )

    # Round up so the returned rate still reaches the target
    return math.ceil(high * 10) / 10


def is_at_ceiling(daily_games: float, config: ForecastConfig) -> bool:
    """Check if a solved rate means the target is out of reach.

    Args:
        daily_games: Rate returned by ``solve_required_daily_games``
        config: Configuration the rate was solved for

    Returns:
        True if the rate is at (or above) the solver ceiling
    """
    return daily_games >= config.solver.max_upper_bound - config.solver.tolerance
