"""
Default configuration values for HONORCAST forecasts.

Honor and mark values were collected from observed battleground results
and quest rewards. Values marked with (observed) come from repeated
in-game samples; values marked with (estimated) are placeholders that
players are expected to tune for their own realm and bracket.
"""

from datetime import date, timedelta
from typing import Any

# =============================================================================
# MARKS OF HONOR
# =============================================================================

# Marks awarded per game by outcome (observed)
MARKS_PER_WIN = 3
MARKS_PER_LOSS = 1

# Marks kept back per battleground type before turning in (estimated)
MARKS_THRESHOLD_PER_BG = 50

# =============================================================================
# PHASES
# =============================================================================

# Each phase has its own battleground rotation and turn-in bundle.
# A turn-in set consumes one mark of every active battleground type.
PHASES: dict[str, dict[str, Any]] = {
    "classic": {
        "battlegrounds": ["wsg", "ab", "av"],
        "marks_per_turn_in": 3,
        "daily_quest_honor": 419.0,  # observed
        "turn_in_honor": 314.0,  # observed
    },
    "tbc": {
        "battlegrounds": ["wsg", "ab", "av", "eots"],
        "marks_per_turn_in": 4,
        "daily_quest_honor": 600.0,  # estimated
        "turn_in_honor": 400.0,  # estimated
    },
}

# =============================================================================
# BATTLEGROUND HONOR
# =============================================================================

BATTLEGROUND_HONOR: dict[str, dict[str, float]] = {
    "wsg": {"honor_per_win": 785.0, "honor_per_loss": 271.0},  # observed
    "ab": {"honor_per_win": 626.0, "honor_per_loss": 318.0},  # observed
    "av": {"honor_per_win": 687.0, "honor_per_loss": 374.0},  # observed
    "eots": {"honor_per_win": 700.0, "honor_per_loss": 350.0},  # estimated
}

# =============================================================================
# FORECAST HORIZON
# =============================================================================

DEFAULT_HORIZON_DAYS = 28
DEFAULT_PHASE_CHANGE_OFFSET_DAYS = 7

# Open-horizon runs keep going this many days past the goal day
EXTRA_DAYS_AFTER_GOAL = 7

# Hard ceiling on open-horizon runs
MAX_FORECAST_DAYS = 365

# =============================================================================
# RATE SOLVER
# =============================================================================

SOLVER_INITIAL_UPPER_BOUND = 100.0
SOLVER_MAX_UPPER_BOUND = 10000.0
SOLVER_TOLERANCE = 0.1


def default_timeline(today: date | None = None) -> dict[str, Any]:
    """Build the default timeline anchored on a given day.

    Args:
        today: Anchor date (defaults to the current local date)

    Returns:
        Timeline section as a plain dict
    """
    today = today or date.today()
    return {
        "start_date": today,
        "end_date": today + timedelta(days=DEFAULT_HORIZON_DAYS),
        "phase": "classic",
        "phase_change_date": today + timedelta(days=DEFAULT_PHASE_CHANGE_OFFSET_DAYS),
        "next_phase": "tbc",
    }


# =============================================================================
# COMPLETE DEFAULT CONFIGURATION
# =============================================================================

DEFAULT_CONFIG: dict[str, Any] = {
    "phases": PHASES,
    "rewards": {
        "battlegrounds": BATTLEGROUND_HONOR,
        "shared": None,
        "bg_honor_mult": 1.0,
        "quest_honor_mult": 1.0,
    },
    "marks": {
        "marks_per_win": MARKS_PER_WIN,
        "marks_per_loss": MARKS_PER_LOSS,
        "threshold_per_bg": MARKS_THRESHOLD_PER_BG,
        "enable_turn_ins": True,
        "tracking": "pooled",
    },
    "win_rate": 0.5,
    "goal": {
        "honor_target": 75000.0,
        "starting_honor": 0.0,
        "starting_marks": 0.0,
    },
    "rate": {
        "mode": "auto",
        "manual_games_per_day": 10.0,
        "extra_days_after_goal": EXTRA_DAYS_AFTER_GOAL,
        "max_days": MAX_FORECAST_DAYS,
    },
    "solver": {
        "initial_upper_bound": SOLVER_INITIAL_UPPER_BOUND,
        "max_upper_bound": SOLVER_MAX_UPPER_BOUND,
        "tolerance": SOLVER_TOLERANCE,
    },
}
