"""
Plan file import/export for HONORCAST.

A plan file bundles a configuration with the player's day entries so a
forecast can be shared or resumed elsewhere. Files are JSON or YAML and
carry a schema version for future migrations.
"""

from datetime import date, datetime
from pathlib import Path
from typing import Any, Iterable, Optional

from pydantic import BaseModel, Field
from pydantic import ValidationError as PydanticValidationError

from honorcast.config.schema import ForecastConfig, read_data_file, write_data_file
from honorcast.engine.validation import validate_config
from honorcast.models.overrides import DayEntry

CURRENT_SCHEMA_VERSION = 1


class PlanFile(BaseModel):
    """A configuration plus day entries."""

    version: int = Field(default=CURRENT_SCHEMA_VERSION, ge=0)
    config: ForecastConfig
    entries: list[DayEntry] = Field(default_factory=list)
    last_updated: str = Field(
        default_factory=lambda: datetime.now().isoformat(),
        description="ISO timestamp of the last change",
    )


class PlanLoadError(Exception):
    """Exception raised when a plan cannot be loaded."""

    pass


class PlanSaveError(Exception):
    """Exception raised when a plan cannot be saved."""

    pass


def migrate(data: Any, validate: bool = True) -> PlanFile:
    """Bring raw plan data up to the current schema version.

    Version 0 (missing version field) is read as version 1.

    Args:
        data: Parsed JSON/YAML document
        validate: Reject configurations that fail validation

    Returns:
        PlanFile at the current schema version

    Raises:
        PlanLoadError: If the data is malformed, too new, or its config
            does not validate
    """
    if not isinstance(data, dict):
        raise PlanLoadError("Invalid data format")

    version = data.get("version", 0)
    if not isinstance(version, int):
        raise PlanLoadError(f"Unknown schema version: {version}")

    if version > CURRENT_SCHEMA_VERSION:
        raise PlanLoadError(
            f"Data version {version} is newer than supported version "
            f"{CURRENT_SCHEMA_VERSION}"
        )
    if version < 0:
        raise PlanLoadError(f"Unknown schema version: {version}")

    if not isinstance(data.get("config"), dict):
        raise PlanLoadError("Missing or invalid config")

    entries = data.get("entries")
    if not isinstance(entries, list):
        entries = []

    payload = {
        "version": CURRENT_SCHEMA_VERSION,
        "config": data["config"],
        "entries": entries,
    }
    if isinstance(data.get("last_updated"), str):
        payload["last_updated"] = data["last_updated"]

    try:
        plan = PlanFile.model_validate(payload)
    except PydanticValidationError as e:
        raise PlanLoadError(f"Invalid plan data: {e}") from e

    if not validate:
        return plan

    validation = validate_config(plan.config)
    if not validation.valid:
        raise PlanLoadError(
            "Invalid config: " + ", ".join(str(err) for err in validation.errors)
        )

    return plan


def load_plan(path: str | Path, validate: bool = True) -> PlanFile:
    """Load a plan file.

    A bare configuration file (no ``config`` key) is accepted as a plan
    with no entries.

    Args:
        path: Path to a .json or .yaml/.yml file
        validate: Reject configurations that fail validation

    Returns:
        PlanFile

    Raises:
        PlanLoadError: If loading fails
    """
    path = Path(path)
    try:
        data = read_data_file(path)
    except FileNotFoundError as e:
        raise PlanLoadError(f"Plan file not found: {path}") from e
    except ValueError as e:
        raise PlanLoadError(str(e)) from e
    except Exception as e:
        raise PlanLoadError(f"Failed to read plan file {path}: {e}") from e

    if isinstance(data, dict) and "config" not in data:
        data = {"version": CURRENT_SCHEMA_VERSION, "config": data, "entries": []}

    return migrate(data, validate=validate)


def save_plan(
    path: str | Path,
    config: ForecastConfig,
    entries: Iterable[DayEntry] = (),
) -> Path:
    """Save a configuration and entries as a plan file.

    Args:
        path: Destination (.json or .yaml/.yml)
        config: Forecast configuration
        entries: Day entries

    Returns:
        Path written

    Raises:
        PlanSaveError: If saving fails
    """
    path = Path(path)
    plan = PlanFile(config=config, entries=list(entries))

    try:
        path.parent.mkdir(parents=True, exist_ok=True)
        write_data_file(path, plan.model_dump(mode="json"))
    except (OSError, ValueError) as e:
        raise PlanSaveError(f"Failed to save plan: {e}") from e

    return path


def export_filename(day: Optional[date] = None) -> str:
    """Default file name for an exported plan."""
    day = day or date.today()
    return f"honorcast-plan-{day.isoformat()}.json"
