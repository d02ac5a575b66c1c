"""
Configuration schema for HONORCAST forecasts.

Provides Pydantic models for configuration loading and type safety.
Domain bounds (win rate range, non-negative honor and so on) are checked
by ``honorcast.engine.validation`` so that every problem can be reported
at once instead of failing on the first bad field.
"""

from datetime import date, timedelta
from enum import Enum
from pathlib import Path
from typing import Any, Optional

from pydantic import BaseModel, Field, model_validator

from honorcast.config.defaults import (
    BATTLEGROUND_HONOR,
    DEFAULT_PHASE_CHANGE_OFFSET_DAYS,
    EXTRA_DAYS_AFTER_GOAL,
    MARKS_PER_LOSS,
    MARKS_PER_WIN,
    MARKS_THRESHOLD_PER_BG,
    MAX_FORECAST_DAYS,
    PHASES,
    SOLVER_INITIAL_UPPER_BOUND,
    SOLVER_MAX_UPPER_BOUND,
    SOLVER_TOLERANCE,
    default_timeline,
)


class RateMode(str, Enum):
    """How the daily game count is chosen."""

    AUTO = "auto"
    MANUAL = "manual"


class MarksTracking(str, Enum):
    """Granularity at which marks are tracked."""

    POOLED = "pooled"
    PER_BG = "per_bg"


class BattlegroundHonor(BaseModel):
    """Honor awarded for a single battleground by outcome."""

    honor_per_win: float = Field(default=0.0, description="Honor for a win")
    honor_per_loss: float = Field(default=0.0, description="Honor for a loss")


class PhaseConfig(BaseModel):
    """Battleground rotation and quest rewards for one game phase."""

    battlegrounds: list[str] = Field(
        default_factory=list,
        description="Battleground codes active in this phase",
    )
    marks_per_turn_in: int = Field(
        default=3,
        description="Marks consumed by one turn-in set (one per battleground)",
    )
    daily_quest_honor: float = Field(
        default=0.0,
        description="Base honor from the daily battleground quest",
    )
    turn_in_honor: float = Field(
        default=0.0,
        description="Base honor per turn-in set",
    )

    @property
    def num_bgs(self) -> int:
        """Number of active battleground types."""
        return len(self.battlegrounds)


def _default_phases() -> dict[str, PhaseConfig]:
    return {name: PhaseConfig.model_validate(data) for name, data in PHASES.items()}


def _default_battlegrounds() -> dict[str, BattlegroundHonor]:
    return {
        code: BattlegroundHonor.model_validate(data)
        for code, data in BATTLEGROUND_HONOR.items()
    }


class TimelineConfig(BaseModel):
    """Forecast date range and phase schedule."""

    start_date: date = Field(
        default_factory=lambda: default_timeline()["start_date"],
        description="First forecast day",
    )
    end_date: date = Field(
        default_factory=lambda: default_timeline()["end_date"],
        description="Day the honor target should be reached by (inclusive)",
    )
    phase: str = Field(
        default="classic",
        description="Phase active on the start date",
    )
    phase_change_date: Optional[date] = Field(
        default=None,
        description="First day of the next phase (None = no phase change)",
    )
    next_phase: Optional[str] = Field(
        default="tbc",
        description="Phase active from phase_change_date onwards",
    )

    @model_validator(mode="after")
    def _derive_phase_change(self) -> "TimelineConfig":
        """Place an unspecified phase change a week after the start date.

        A range too short to contain that day gets no phase change.
        """
        if "phase_change_date" in self.model_fields_set or self.next_phase is None:
            return self
        change = self.start_date + timedelta(days=DEFAULT_PHASE_CHANGE_OFFSET_DAYS)
        if change <= self.end_date:
            self.phase_change_date = change
        return self

    @property
    def total_days(self) -> int:
        """Inclusive number of days between start and end dates."""
        return (self.end_date - self.start_date).days + 1


class RewardsConfig(BaseModel):
    """Honor rewards and multipliers."""

    battlegrounds: dict[str, BattlegroundHonor] = Field(
        default_factory=_default_battlegrounds,
        description="Honor per win/loss by battleground code",
    )
    shared: Optional[BattlegroundHonor] = Field(
        default=None,
        description="Win/loss pair used for battlegrounds without their own entry",
    )
    bg_honor_mult: float = Field(
        default=1.0,
        description="Multiplier applied to battleground honor",
    )
    quest_honor_mult: float = Field(
        default=1.0,
        description="Multiplier applied to daily quest and turn-in honor",
    )

    def honor_for(self, code: str) -> Optional[BattlegroundHonor]:
        """Look up the reward pair for a battleground.

        Args:
            code: Battleground code

        Returns:
            The battleground's own entry, the shared pair, or None
        """
        return self.battlegrounds.get(code, self.shared)


class MarksConfig(BaseModel):
    """Marks of honor accumulation and turn-in behavior."""

    marks_per_win: float = Field(default=MARKS_PER_WIN, description="Marks for a win")
    marks_per_loss: float = Field(default=MARKS_PER_LOSS, description="Marks for a loss")
    threshold_per_bg: float = Field(
        default=MARKS_THRESHOLD_PER_BG,
        description="Marks kept in reserve per battleground type",
    )
    enable_turn_ins: bool = Field(
        default=True,
        description="Whether surplus marks are turned in for honor",
    )
    tracking: MarksTracking = Field(
        default=MarksTracking.POOLED,
        description="Track marks as one pool or as a per-battleground level",
    )


class GoalConfig(BaseModel):
    """Honor target and day-zero state."""

    honor_target: float = Field(default=75000.0, description="Cumulative honor target")
    starting_honor: float = Field(default=0.0, description="Honor before day 1")
    starting_marks: float = Field(default=0.0, description="Marks before day 1")

    @property
    def honor_needed(self) -> float:
        """Honor still missing at the start of the forecast."""
        return max(0.0, self.honor_target - self.starting_honor)


class RateConfig(BaseModel):
    """Daily game rate selection."""

    mode: RateMode = Field(
        default=RateMode.AUTO,
        description="auto = solve for games/day, manual = use manual_games_per_day",
    )
    manual_games_per_day: float = Field(
        default=10.0,
        description="Games per day in manual mode",
    )
    extra_days_after_goal: int = Field(
        default=EXTRA_DAYS_AFTER_GOAL,
        description="Days shown past the goal day in open-ended runs",
    )
    max_days: int = Field(
        default=MAX_FORECAST_DAYS,
        description="Hard ceiling on open-ended runs",
    )


class SolverConfig(BaseModel):
    """Bisection parameters for the daily game solver."""

    initial_upper_bound: float = Field(
        default=SOLVER_INITIAL_UPPER_BOUND,
        description="Starting upper bound for games/day",
    )
    max_upper_bound: float = Field(
        default=SOLVER_MAX_UPPER_BOUND,
        description="Upper bound ceiling; reaching it means the target is unreachable",
    )
    tolerance: float = Field(
        default=SOLVER_TOLERANCE,
        description="Bisection stops once the bracket is narrower than this",
    )


class ForecastConfig(BaseModel):
    """Complete HONORCAST configuration.

    This is the top-level configuration object handed to the engine. It is
    treated as immutable for the length of a forecast run.
    """

    timeline: TimelineConfig = Field(default_factory=TimelineConfig)
    phases: dict[str, PhaseConfig] = Field(default_factory=_default_phases)
    rewards: RewardsConfig = Field(default_factory=RewardsConfig)
    marks: MarksConfig = Field(default_factory=MarksConfig)
    win_rate: float = Field(default=0.5, description="Win probability shared by all BGs")
    goal: GoalConfig = Field(default_factory=GoalConfig)
    rate: RateConfig = Field(default_factory=RateConfig)
    solver: SolverConfig = Field(default_factory=SolverConfig)

    @classmethod
    def from_dict(cls, data: dict[str, Any]) -> "ForecastConfig":
        """Create configuration from a dictionary.

        Args:
            data: Configuration dictionary (can be partial)

        Returns:
            ForecastConfig with defaults for any missing values
        """
        return cls.model_validate(data)

    @classmethod
    def from_file(cls, path: str | Path) -> "ForecastConfig":
        """Load configuration from a JSON or YAML file.

        Args:
            path: Path to configuration file (.json or .yaml/.yml)

        Returns:
            Parsed configuration

        Raises:
            FileNotFoundError: If file doesn't exist
            ValueError: If file format is not supported
        """
        return cls.from_dict(read_data_file(path))

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to a dictionary."""
        return self.model_dump()

    def to_file(self, path: str | Path) -> None:
        """Save configuration to a JSON or YAML file.

        Args:
            path: Path to save configuration to

        Raises:
            ValueError: If file format is not supported
        """
        write_data_file(path, self.model_dump(mode="json"))

    def merge(self, overrides: dict[str, Any]) -> "ForecastConfig":
        """Create a new config with overrides applied.

        Args:
            overrides: Dictionary of values to override

        Returns:
            New ForecastConfig with overrides merged in
        """
        base = self.to_dict()
        _deep_merge(base, overrides)
        return ForecastConfig.from_dict(base)

    def phase_config(self, name: str) -> PhaseConfig:
        """Get the configuration for a named phase."""
        return self.phases[name]


def read_data_file(path: str | Path) -> Any:
    """Read a JSON or YAML document.

    Raises:
        FileNotFoundError: If file doesn't exist
        ValueError: If file format is not supported
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"File not found: {path}")

    suffix = path.suffix.lower()

    if suffix == ".json":
        import json

        with open(path, encoding="utf-8") as f:
            return json.load(f)
    elif suffix in (".yaml", ".yml"):
        import yaml  # type: ignore[import-untyped]

        with open(path, encoding="utf-8") as f:
            return yaml.safe_load(f)

    raise ValueError(
        f"Unsupported file format: {suffix}. Use .json or .yaml/.yml"
    )


def write_data_file(path: str | Path, data: Any) -> None:
    """Write a JSON or YAML document.

    Raises:
        ValueError: If file format is not supported
    """
    path = Path(path)
    suffix = path.suffix.lower()

    if suffix == ".json":
        import json

        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2)
    elif suffix in (".yaml", ".yml"):
        import yaml  # type: ignore[import-untyped]

        with open(path, "w", encoding="utf-8") as f:
            yaml.dump(data, f, default_flow_style=False, sort_keys=False)
    else:
        raise ValueError(
            f"Unsupported file format: {suffix}. Use .json or .yaml/.yml"
        )


def _deep_merge(base: dict[str, Any], overrides: dict[str, Any]) -> None:
    """Deep merge overrides into base dict (in place).

    Args:
        base: Base dictionary to merge into
        overrides: Values to merge in
    """
    for key, value in overrides.items():
        if (
            key in base
            and isinstance(base[key], dict)
            and isinstance(value, dict)
        ):
            _deep_merge(base[key], value)
        else:
            base[key] = value


def get_default_config(today: Optional[date] = None) -> ForecastConfig:
    """Get the default HONORCAST configuration.

    Args:
        today: Anchor date for the default timeline (defaults to today)

    Returns:
        ForecastConfig with all default values
    """
    if today is None:
        return ForecastConfig()
    return ForecastConfig(timeline=TimelineConfig.model_validate(default_timeline(today)))
