"""
HONORCAST forecasting engine.

This module contains the core forecasting logic:
- Expected-value reward model for battleground games
- Marks turn-in rules
- Single-day state transition
- Fixed and open-ended forecast runs
- Daily game solver
- Configuration validation and planning
"""

from honorcast.engine.day import simulate_day
from honorcast.engine.forecast import (
    Forecaster,
    ForecastResult,
    find_goal_reached_day,
    run_forecast,
    run_forecast_until_goal,
)
from honorcast.engine.planner import (
    ForecastPlan,
    PlanSummary,
    build_plan,
    summarize_plan,
)
from honorcast.engine.rewards import (
    active_phase,
    expected_honor_for_bg,
    expected_honor_per_game,
    expected_marks_per_game,
)
from honorcast.engine.solver import is_at_ceiling, solve_required_daily_games
from honorcast.engine.turnins import TurnInTerms, compute_turn_in_sets, turn_in_terms
from honorcast.engine.validation import (
    ValidationError,
    ValidationResult,
    validate_config,
    validate_config_data,
)

__all__ = [
    # Rewards
    "active_phase",
    "expected_honor_for_bg",
    "expected_honor_per_game",
    "expected_marks_per_game",
    # Turn-ins
    "TurnInTerms",
    "compute_turn_in_sets",
    "turn_in_terms",
    # Day
    "simulate_day",
    # Forecast
    "Forecaster",
    "ForecastResult",
    "find_goal_reached_day",
    "run_forecast",
    "run_forecast_until_goal",
    # Solver
    "is_at_ceiling",
    "solve_required_daily_games",
    # Validation
    "ValidationError",
    "ValidationResult",
    "validate_config",
    "validate_config_data",
    # Planning
    "ForecastPlan",
    "PlanSummary",
    "build_plan",
    "summarize_plan",
]
