"""
HONORCAST - Battleground honor grind forecaster

Forecasts day-by-day honor progress toward a target from daily
battleground games, the daily quest, and marks of honor turn-ins.

This package provides:
- Expected-value reward model for battleground games
- Day-by-day forecast with actual-result overrides
- Solver for the daily game count needed to hit a deadline
- CLI for running forecasts from JSON/YAML plan files
"""

__version__ = "0.1.0"

from honorcast.config.defaults import DEFAULT_CONFIG

__all__ = [
    "__version__",
    "DEFAULT_CONFIG",
]
