"""
Marks of honor turn-in rules.

Marks above the reserve are exchanged for honor in whole turn-in sets.
Two bookkeeping modes share the same arithmetic:

- pooled: one mark total; the reserve is ``threshold * n_bgs`` and a set
  consumes ``marks_per_turn_in`` marks.
- per_bg: the average mark level per battleground type; the reserve is
  ``threshold`` and a set consumes one mark of each type, i.e. one unit
  of the tracked level. Gains are spread evenly over the active types.
"""

import math
from dataclasses import dataclass

from honorcast.config.schema import ForecastConfig, MarksTracking


@dataclass(frozen=True)
class TurnInTerms:
    """Reserve and bundle size for one phase, in tracked units."""

    reserve: float
    bundle_size: float
    lane_divisor: int


def compute_turn_in_sets(
    marks_before_turn_in: float,
    marks_reserve: float,
    marks_per_turn_in: float,
    enable_turn_ins: bool,
) -> int:
    """Number of whole turn-in sets available.

    Args:
        marks_before_turn_in: Marks held before turning in
        marks_reserve: Marks kept back
        marks_per_turn_in: Marks consumed by one set
        enable_turn_ins: False pins the result at 0

    Returns:
        Number of sets (0 if disabled or below the reserve)
    """
    if not enable_turn_ins or marks_per_turn_in <= 0:
        return 0
    excess = max(0.0, marks_before_turn_in - marks_reserve)
    return math.floor(excess / marks_per_turn_in)


def turn_in_terms(config: ForecastConfig, phase: str) -> TurnInTerms:
    """Select the reserve and bundle size for the configured tracking mode.

    Args:
        config: Forecast configuration
        phase: Active phase name

    Returns:
        TurnInTerms for the phase
    """
    phase_config = config.phase_config(phase)
    num_bgs = max(1, phase_config.num_bgs)

    if config.marks.tracking == MarksTracking.PER_BG:
        return TurnInTerms(
            reserve=config.marks.threshold_per_bg,
            bundle_size=1,
            lane_divisor=num_bgs,
        )

    return TurnInTerms(
        reserve=config.marks.threshold_per_bg * num_bgs,
        bundle_size=phase_config.marks_per_turn_in,
        lane_divisor=1,
    )
