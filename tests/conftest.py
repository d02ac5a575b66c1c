"""
Pytest configuration and fixtures for HONORCAST tests.
"""

import copy
from typing import Any, Callable

import pytest

from honorcast.config.schema import ForecastConfig

SIMPLE_CONFIG: dict[str, Any] = {
    "timeline": {
        "start_date": "2024-01-18",
        "end_date": "2024-02-15",
        "phase": "classic",
        "phase_change_date": None,
        "next_phase": None,
    },
    "phases": {
        "classic": {
            "battlegrounds": ["wsg", "ab", "av"],
            "marks_per_turn_in": 3,
            "daily_quest_honor": 419.0,
            "turn_in_honor": 314.0,
        },
        "tbc": {
            "battlegrounds": ["wsg", "ab", "av", "eots"],
            "marks_per_turn_in": 4,
            "daily_quest_honor": 600.0,
            "turn_in_honor": 400.0,
        },
    },
    "rewards": {
        "battlegrounds": {
            "wsg": {"honor_per_win": 200.0, "honor_per_loss": 100.0},
            "ab": {"honor_per_win": 200.0, "honor_per_loss": 100.0},
            "av": {"honor_per_win": 200.0, "honor_per_loss": 100.0},
            "eots": {"honor_per_win": 200.0, "honor_per_loss": 100.0},
        },
        "bg_honor_mult": 1.0,
        "quest_honor_mult": 1.0,
    },
    "marks": {
        "marks_per_win": 3,
        "marks_per_loss": 1,
        "threshold_per_bg": 50,
        "enable_turn_ins": True,
        "tracking": "pooled",
    },
    "win_rate": 0.5,
    "goal": {
        "honor_target": 75000.0,
        "starting_honor": 0.0,
        "starting_marks": 0.0,
    },
}


@pytest.fixture
def simple_config() -> ForecastConfig:
    """Classic-only config with 200/100 honor for every battleground."""
    return ForecastConfig.from_dict(SIMPLE_CONFIG)


@pytest.fixture
def make_config(simple_config: ForecastConfig) -> Callable[..., ForecastConfig]:
    """Return a factory that applies nested overrides to the simple config."""

    def _make(overrides: dict[str, Any] | None = None) -> ForecastConfig:
        return simple_config.merge(overrides or {})

    return _make


@pytest.fixture
def simple_config_data() -> dict[str, Any]:
    """Raw dictionary form of the simple config."""
    return copy.deepcopy(SIMPLE_CONFIG)
