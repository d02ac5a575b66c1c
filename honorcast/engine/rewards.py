"""
Expected-value reward model for battleground games.

Every game is won with the configured win rate. Marks and honor are
averaged over the outcome, and honor is additionally averaged over the
battlegrounds active in the current phase (each type assumed equally
likely to come up).
"""

from datetime import date
from typing import Optional

from honorcast.config.defaults import MARKS_PER_LOSS, MARKS_PER_WIN
from honorcast.config.schema import BattlegroundHonor, ForecastConfig


def expected_marks_per_game(
    win_rate: float,
    marks_per_win: float = MARKS_PER_WIN,
    marks_per_loss: float = MARKS_PER_LOSS,
) -> float:
    """Expected marks earned by one game.

    Linear in the win rate: ``loss + (win - loss) * win_rate``. With the
    default 3/1 marks this is ``1 + 2 * win_rate``.

    Args:
        win_rate: Win probability (0-1)
        marks_per_win: Marks for a win
        marks_per_loss: Marks for a loss

    Returns:
        Expected marks per game
    """
    return marks_per_loss + (marks_per_win - marks_per_loss) * win_rate


def expected_honor_for_bg(bg_honor: BattlegroundHonor, win_rate: float) -> float:
    """Expected honor from one game of a single battleground."""
    return win_rate * bg_honor.honor_per_win + (1 - win_rate) * bg_honor.honor_per_loss


def active_phase(config: ForecastConfig, day: date) -> str:
    """Name of the phase in effect on a calendar date.

    Args:
        config: Forecast configuration
        day: Calendar date

    Returns:
        Phase name
    """
    timeline = config.timeline
    if (
        timeline.next_phase is not None
        and timeline.phase_change_date is not None
        and day >= timeline.phase_change_date
    ):
        return timeline.next_phase
    return timeline.phase


def expected_honor_per_game(
    config: ForecastConfig,
    win_rate: float,
    phase: Optional[str] = None,
) -> float:
    """Mean expected honor per game across the phase's battlegrounds.

    Args:
        config: Forecast configuration
        win_rate: Win probability (0-1)
        phase: Phase name (defaults to the start phase)

    Returns:
        Expected honor per game, before multipliers
    """
    phase_config = config.phase_config(phase or config.timeline.phase)
    codes = phase_config.battlegrounds
    if not codes:
        return 0.0

    total = 0.0
    for code in codes:
        bg_honor = config.rewards.honor_for(code)
        if bg_honor is not None:
            total += expected_honor_for_bg(bg_honor, win_rate)

    return total / len(codes)
