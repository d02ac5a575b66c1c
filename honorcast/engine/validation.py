"""
Configuration validation for HONORCAST.

Checks a configuration before it is forecast. Every violated field is
reported, not just the first, so the caller can show all problems at
once. The engine itself assumes a configuration that passed here.
"""

from dataclasses import dataclass, field
from typing import Any, Optional

from pydantic import ValidationError as PydanticValidationError

from honorcast.config.schema import ForecastConfig, RateMode


@dataclass
class ValidationError:
    """A single validation error."""

    field: str
    message: str
    value: Optional[str] = None
    suggestion: Optional[str] = None

    def __str__(self) -> str:
        msg = f"{self.field}: {self.message}"
        if self.value:
            msg += f" (got: {self.value})"
        if self.suggestion:
            msg += f" - {self.suggestion}"
        return msg


@dataclass
class ValidationResult:
    """Result of validating a configuration."""

    valid: bool
    errors: list[ValidationError] = field(default_factory=list)
    warnings: list[ValidationError] = field(default_factory=list)

    @classmethod
    def success(cls) -> "ValidationResult":
        """Create a successful validation result."""
        return cls(valid=True)

    @classmethod
    def failure(cls, errors: list[ValidationError]) -> "ValidationResult":
        """Create a failed validation result."""
        return cls(valid=False, errors=errors)

    def add_error(self, error: ValidationError) -> None:
        """Add an error and mark as invalid."""
        self.errors.append(error)
        self.valid = False

    def add_warning(self, warning: ValidationError) -> None:
        """Add a warning (doesn't affect validity)."""
        self.warnings.append(warning)

    def merge(self, other: "ValidationResult") -> None:
        """Merge another result into this one."""
        self.errors.extend(other.errors)
        self.warnings.extend(other.warnings)
        if not other.valid:
            self.valid = False

    @property
    def messages(self) -> list[str]:
        """Error and warning messages, errors first."""
        return [f"[ERROR] {e}" for e in self.errors] + [
            f"[WARNING] {w}" for w in self.warnings
        ]


def validate_config(config: ForecastConfig) -> ValidationResult:
    """Validate a forecast configuration.

    Args:
        config: Configuration to validate

    Returns:
        ValidationResult with all errors/warnings found
    """
    result = ValidationResult(valid=True)

    result.merge(_validate_timeline(config))
    result.merge(_validate_phases(config))
    result.merge(_validate_rewards(config))
    result.merge(_validate_marks(config))
    result.merge(_validate_goal(config))
    result.merge(_validate_rate(config))

    return result


def validate_config_data(data: dict[str, Any]) -> tuple[Optional[ForecastConfig], ValidationResult]:
    """Parse and validate raw configuration data.

    Structural problems (wrong types, unknown enum tags, bad dates) are
    reported as validation errors instead of raised.

    Args:
        data: Configuration dictionary (can be partial)

    Returns:
        Tuple of (config or None if it could not be parsed, validation result)
    """
    try:
        config = ForecastConfig.from_dict(data)
    except PydanticValidationError as e:
        result = ValidationResult(valid=True)
        for err in e.errors():
            result.add_error(ValidationError(
                field=".".join(str(part) for part in err["loc"]),
                message=err["msg"],
                value=_short_repr(err.get("input")),
            ))
        return None, result

    return config, validate_config(config)


def _short_repr(value: Any) -> Optional[str]:
    if value is None or isinstance(value, dict):
        return None
    text = str(value)
    return text if len(text) <= 40 else text[:37] + "..."


def _validate_timeline(config: ForecastConfig) -> ValidationResult:
    """Validate the date range and phase schedule."""
    result = ValidationResult(valid=True)
    timeline = config.timeline

    if timeline.end_date < timeline.start_date:
        result.add_error(ValidationError(
            field="timeline.end_date",
            message="End date must be on or after the start date",
            value=f"start={timeline.start_date}, end={timeline.end_date}",
        ))

    if timeline.phase not in config.phases:
        result.add_error(ValidationError(
            field="timeline.phase",
            message="Unknown phase",
            value=timeline.phase,
            suggestion=f"Use one of: {', '.join(sorted(config.phases))}",
        ))

    if timeline.next_phase is not None and timeline.next_phase not in config.phases:
        result.add_error(ValidationError(
            field="timeline.next_phase",
            message="Unknown phase",
            value=timeline.next_phase,
            suggestion=f"Use one of: {', '.join(sorted(config.phases))}",
        ))

    change = timeline.phase_change_date
    if timeline.next_phase is not None and change is not None:
        if change < timeline.start_date:
            result.add_error(ValidationError(
                field="timeline.phase_change_date",
                message="Phase change date must be on or after the start date",
                value=str(change),
            ))
        elif change > timeline.end_date:
            result.add_error(ValidationError(
                field="timeline.phase_change_date",
                message="Phase change date must be on or before the end date",
                value=str(change),
            ))

    return result


def _validate_phases(config: ForecastConfig) -> ValidationResult:
    """Validate every phase definition."""
    result = ValidationResult(valid=True)

    for name, phase in config.phases.items():
        prefix = f"phases.{name}"

        if phase.num_bgs <= 0:
            result.add_error(ValidationError(
                field=f"{prefix}.battlegrounds",
                message="A phase needs at least one battleground",
            ))

        for code in phase.battlegrounds:
            if config.rewards.honor_for(code) is None:
                result.add_error(ValidationError(
                    field=f"{prefix}.battlegrounds",
                    message="Battleground has no honor values",
                    value=code,
                    suggestion="Add it to rewards.battlegrounds or set rewards.shared",
                ))

        if phase.marks_per_turn_in <= 0:
            result.add_error(ValidationError(
                field=f"{prefix}.marks_per_turn_in",
                message="Marks per turn-in must be > 0",
                value=str(phase.marks_per_turn_in),
            ))

        if phase.daily_quest_honor < 0:
            result.add_error(ValidationError(
                field=f"{prefix}.daily_quest_honor",
                message="Daily quest honor cannot be negative",
                value=str(phase.daily_quest_honor),
            ))

        if phase.turn_in_honor < 0:
            result.add_error(ValidationError(
                field=f"{prefix}.turn_in_honor",
                message="Turn-in honor cannot be negative",
                value=str(phase.turn_in_honor),
            ))

    return result


def _validate_rewards(config: ForecastConfig) -> ValidationResult:
    """Validate honor values and multipliers."""
    result = ValidationResult(valid=True)
    rewards = config.rewards

    pairs = list(rewards.battlegrounds.items())
    if rewards.shared is not None:
        pairs.append(("shared", rewards.shared))

    for code, honor in pairs:
        prefix = "rewards.shared" if code == "shared" else f"rewards.battlegrounds.{code}"
        if honor.honor_per_win < 0:
            result.add_error(ValidationError(
                field=f"{prefix}.honor_per_win",
                message="Honor per win cannot be negative",
                value=str(honor.honor_per_win),
            ))
        if honor.honor_per_loss < 0:
            result.add_error(ValidationError(
                field=f"{prefix}.honor_per_loss",
                message="Honor per loss cannot be negative",
                value=str(honor.honor_per_loss),
            ))

    if rewards.bg_honor_mult <= 0:
        result.add_error(ValidationError(
            field="rewards.bg_honor_mult",
            message="Battleground honor multiplier must be > 0",
            value=str(rewards.bg_honor_mult),
        ))

    if rewards.quest_honor_mult <= 0:
        result.add_error(ValidationError(
            field="rewards.quest_honor_mult",
            message="Quest honor multiplier must be > 0",
            value=str(rewards.quest_honor_mult),
        ))

    if config.win_rate < 0 or config.win_rate > 1:
        result.add_error(ValidationError(
            field="win_rate",
            message="Win rate must be between 0 and 1",
            value=str(config.win_rate),
        ))

    return result


def _validate_marks(config: ForecastConfig) -> ValidationResult:
    """Validate marks settings."""
    result = ValidationResult(valid=True)
    marks = config.marks

    if marks.marks_per_win < 0:
        result.add_error(ValidationError(
            field="marks.marks_per_win",
            message="Marks per win cannot be negative",
            value=str(marks.marks_per_win),
        ))

    if marks.marks_per_loss < 0:
        result.add_error(ValidationError(
            field="marks.marks_per_loss",
            message="Marks per loss cannot be negative",
            value=str(marks.marks_per_loss),
        ))

    if marks.threshold_per_bg < 0:
        result.add_error(ValidationError(
            field="marks.threshold_per_bg",
            message="Marks threshold cannot be negative",
            value=str(marks.threshold_per_bg),
        ))

    if not marks.enable_turn_ins and any(
        phase.turn_in_honor > 0 for phase in config.phases.values()
    ):
        result.add_warning(ValidationError(
            field="marks.enable_turn_ins",
            message="Turn-ins are disabled; turn-in honor will not be earned",
        ))

    return result


def _validate_goal(config: ForecastConfig) -> ValidationResult:
    """Validate target and starting state."""
    result = ValidationResult(valid=True)
    goal = config.goal

    if goal.honor_target <= 0:
        result.add_error(ValidationError(
            field="goal.honor_target",
            message="Honor target must be > 0",
            value=str(goal.honor_target),
        ))

    if goal.starting_honor < 0:
        result.add_error(ValidationError(
            field="goal.starting_honor",
            message="Starting honor cannot be negative",
            value=str(goal.starting_honor),
        ))

    if goal.starting_marks < 0:
        result.add_error(ValidationError(
            field="goal.starting_marks",
            message="Starting marks cannot be negative",
            value=str(goal.starting_marks),
        ))

    if goal.honor_target > 0 and goal.starting_honor >= goal.honor_target:
        result.add_warning(ValidationError(
            field="goal.starting_honor",
            message="Starting honor already meets the target",
        ))

    return result


def _validate_rate(config: ForecastConfig) -> ValidationResult:
    """Validate rate mode and solver settings."""
    result = ValidationResult(valid=True)
    rate = config.rate
    solver = config.solver

    if rate.mode == RateMode.MANUAL and rate.manual_games_per_day < 0:
        result.add_error(ValidationError(
            field="rate.manual_games_per_day",
            message="Games per day cannot be negative",
            value=str(rate.manual_games_per_day),
        ))

    if rate.max_days <= 0:
        result.add_error(ValidationError(
            field="rate.max_days",
            message="Maximum forecast days must be > 0",
            value=str(rate.max_days),
        ))

    if rate.extra_days_after_goal < 0:
        result.add_error(ValidationError(
            field="rate.extra_days_after_goal",
            message="Extra days after goal cannot be negative",
            value=str(rate.extra_days_after_goal),
        ))

    if solver.initial_upper_bound <= 0:
        result.add_error(ValidationError(
            field="solver.initial_upper_bound",
            message="Initial upper bound must be > 0",
            value=str(solver.initial_upper_bound),
        ))

    if solver.max_upper_bound < solver.initial_upper_bound:
        result.add_error(ValidationError(
            field="solver.max_upper_bound",
            message="Upper bound ceiling must be >= the initial upper bound",
            value=str(solver.max_upper_bound),
        ))

    if solver.tolerance <= 0:
        result.add_error(ValidationError(
            field="solver.tolerance",
            message="Solver tolerance must be > 0",
            value=str(solver.tolerance),
        ))

    return result
