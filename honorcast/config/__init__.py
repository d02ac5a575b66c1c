"""
Configuration management for HONORCAST.

This module provides:
- Default honor, marks and phase values
- Configuration schema (Pydantic)
- Support for custom configuration files (JSON/YAML)
"""

from honorcast.config.defaults import DEFAULT_CONFIG
from honorcast.config.schema import (
    BattlegroundHonor,
    ForecastConfig,
    GoalConfig,
    MarksConfig,
    MarksTracking,
    PhaseConfig,
    RateConfig,
    RateMode,
    RewardsConfig,
    SolverConfig,
    TimelineConfig,
    get_default_config,
)

__all__ = [
    # Plain dict defaults
    "DEFAULT_CONFIG",
    # Pydantic config classes
    "BattlegroundHonor",
    "ForecastConfig",
    "GoalConfig",
    "MarksConfig",
    "MarksTracking",
    "PhaseConfig",
    "RateConfig",
    "RateMode",
    "RewardsConfig",
    "SolverConfig",
    "TimelineConfig",
    # Functions
    "get_default_config",
]
