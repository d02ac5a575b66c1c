"""
HONORCAST Command-Line Interface.

Runs honor forecasts from configuration or plan files and prints the
day-by-day table, the required daily games, and the goal day.
"""

import logging
import sys
from datetime import timedelta
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.panel import Panel
from rich.table import Table

from honorcast import __version__
from honorcast.config.schema import ForecastConfig, RateMode, get_default_config
from honorcast.engine.planner import ForecastPlan, build_plan, summarize_plan
from honorcast.engine.validation import ValidationResult, validate_config
from honorcast.io import PlanFile, PlanLoadError, PlanSaveError, load_plan, save_plan
from honorcast.models.overrides import (
    DayOverrides,
    clear_override,
    overrides_by_day,
    set_override,
)

console = Console()


# =============================================================================
# Main CLI Group
# =============================================================================


@click.group()
@click.version_option(version=__version__, prog_name="HONORCAST")
@click.option("--verbose", "-v", is_flag=True, help="Show solver and forecast debug output")
def cli(verbose: bool) -> None:
    """
    HONORCAST - Battleground honor grind forecaster

    Plans how many battleground games a day are needed to reach an honor
    target by a deadline.
    """
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=console, show_path=False)],
        force=True,
    )


# =============================================================================
# Commands
# =============================================================================


@cli.command()
@click.argument("path", type=click.Path(dir_okay=False))
@click.option("--force", "-f", is_flag=True, help="Overwrite an existing file")
def init(path: str, force: bool) -> None:
    """Write a default configuration to PATH (.json, .yaml or .yml)."""
    target = Path(path)
    if target.exists() and not force:
        console.print(f"[red]{target} already exists (use --force to overwrite)[/red]")
        sys.exit(1)

    try:
        get_default_config().to_file(target)
    except (OSError, ValueError) as e:
        console.print(f"[red]Failed to write config: {e}[/red]")
        sys.exit(1)

    console.print(f"[green]Default configuration written to {target}[/green]")


@cli.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False))
def validate(source: str) -> None:
    """Check a configuration or plan file for problems."""
    plan_file = _load_or_exit(source, validate=False)
    result = validate_config(plan_file.config)
    _display_validation(result)
    if not result.valid:
        sys.exit(1)
    console.print("[green]Configuration is valid.[/green]")


@cli.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False))
@click.option("--games", "-g", type=float, default=None, help="Fixed games per day (manual mode)")
@click.option("--until-goal", is_flag=True, help="Run past the end date until the goal is reached")
@click.option("--export", "-o", "export_path", type=click.Path(dir_okay=False), help="Save the plan to this file")
def forecast(
    source: str,
    games: Optional[float],
    until_goal: bool,
    export_path: Optional[str],
) -> None:
    """Forecast honor day by day.

    SOURCE is a configuration file or a plan file with day entries.
    """
    plan_file = _load_or_exit(source)
    config = plan_file.config
    if games is not None:
        config = config.merge({"rate": {"mode": "manual", "manual_games_per_day": games}})

    plan = build_plan(config, plan_file.entries, until_goal=True if until_goal else None)
    if not plan.is_valid:
        _display_validation(plan.validation)
        sys.exit(1)

    _display_forecast(plan)
    _display_summary(config, plan)

    if export_path:
        try:
            written = save_plan(export_path, config, plan_file.entries)
            console.print(f"[green]Plan saved to {written}[/green]")
        except PlanSaveError as e:
            console.print(f"[red]{e}[/red]")
            sys.exit(1)


@cli.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False))
def solve(source: str) -> None:
    """Print the games per day needed to reach the target by the end date."""
    plan_file = _load_or_exit(source)
    config = plan_file.config.merge({"rate": {"mode": RateMode.AUTO.value}})

    plan = build_plan(config, plan_file.entries)
    if not plan.is_valid:
        _display_validation(plan.validation)
        sys.exit(1)

    summary = summarize_plan(config, plan)
    if summary.unreachable:
        console.print(
            f"[yellow]Target of {config.goal.honor_target:,.0f} honor is out of reach "
            f"by {config.timeline.end_date}.[/yellow]"
        )
        sys.exit(2)

    console.print(f"{plan.daily_games:.1f}")


@cli.command()
@click.argument("source", type=click.Path(exists=True, dir_okay=False))
@click.argument("day", type=click.IntRange(min=1))
@click.option("--honor", type=float, default=None, help="Actual honor at the end of the day")
@click.option("--marks", type=float, default=None, help="Actual marks at the end of the day")
@click.option("--clear", is_flag=True, help="Remove the recorded values for the day")
@click.option("--output", "-o", "output_path", type=click.Path(dir_okay=False), help="Write the plan here instead of SOURCE")
def record(
    source: str,
    day: int,
    honor: Optional[float],
    marks: Optional[float],
    clear: bool,
    output_path: Optional[str],
) -> None:
    """Record actual end-of-day values for DAY in a plan file.

    SOURCE is a plan or configuration file; it is rewritten as a plan
    unless --output is given.
    """
    plan_file = _load_or_exit(source, validate=False)
    entries = list(plan_file.entries)

    if clear:
        entries = clear_override(entries, day)
    else:
        given = DayOverrides(actual_honor_end_of_day=honor, actual_marks_end_of_day=marks)
        if given.is_empty:
            console.print("[red]Give --honor and/or --marks, or --clear[/red]")
            sys.exit(1)
        # Values not given keep what was recorded before
        existing = overrides_by_day(entries).get(day, DayOverrides())
        overrides = existing.model_copy(update=given.model_dump(exclude_none=True))
        day_date = plan_file.config.timeline.start_date + timedelta(days=day - 1)
        entries = set_override(entries, day, day_date, overrides)

    try:
        written = save_plan(output_path or source, plan_file.config, entries)
    except PlanSaveError as e:
        console.print(f"[red]{e}[/red]")
        sys.exit(1)

    action = "Cleared" if clear else "Recorded"
    console.print(f"[green]{action} day {day} in {written}[/green]")


@cli.command()
def info() -> None:
    """Show information about HONORCAST."""
    console.print(Panel.fit(
        """[bold blue]HONORCAST - Battleground honor grind forecaster[/bold blue]

Each day earns honor from three sources:
  - Battleground games (expected honor at your win rate)
  - The daily battleground quest
  - Marks of honor turned in above your reserve

Record actual end-of-day honor or marks in a plan file and the
forecast re-anchors on them from that day onwards.""",
        title="About HONORCAST",
        border_style="blue",
    ))


# =============================================================================
# Helpers
# =============================================================================


def _load_or_exit(source: str, validate: bool = True) -> PlanFile:
    try:
        return load_plan(source, validate=validate)
    except PlanLoadError as e:
        console.print(f"[red]Error loading {source}: {e}[/red]")
        sys.exit(1)


def _display_validation(result: ValidationResult) -> None:
    for error in result.errors:
        console.print(f"[red]ERROR[/red] {error}")
    for warning in result.warnings:
        console.print(f"[yellow]WARNING[/yellow] {warning}")


def _display_forecast(plan: ForecastPlan) -> None:
    table = Table(title="Forecast", box=None)
    table.add_column("Day", justify="right")
    table.add_column("Date")
    table.add_column("Phase")
    table.add_column("Games", justify="right")
    table.add_column("BG Honor", justify="right")
    table.add_column("Quest", justify="right")
    table.add_column("Turn-ins", justify="right")
    table.add_column("Marks", justify="right")
    table.add_column("Honor", justify="right")

    for day in plan.results:
        honor = f"{day.honor_end_of_day:,.0f}"
        if day.is_goal_reached_day:
            honor = f"[bold green]{honor}[/bold green]"
        elif day.override_applied:
            honor = f"[cyan]{honor}[/cyan]"
        table.add_row(
            str(day.day_index),
            day.date.isoformat(),
            day.phase,
            f"{day.games_planned:.1f}",
            f"{day.honor_from_bgs:,.0f}",
            f"{day.honor_from_daily_quest:,.0f}",
            f"{day.turn_in_sets} ({day.honor_from_turn_ins:,.0f})",
            f"{day.marks_after_turn_in:,.1f}",
            honor,
        )

    console.print(table)


def _display_summary(config: ForecastConfig, plan: ForecastPlan) -> None:
    summary = summarize_plan(config, plan)
    goal_day = plan.goal_day

    lines = [
        f"Honor: {config.goal.starting_honor:,.0f} / {config.goal.honor_target:,.0f} "
        f"({summary.progress_percent:.1f}%)",
        f"Honor needed: {summary.honor_needed:,.0f}",
        f"Days: {summary.total_days}",
        f"Games per day: {plan.daily_games:.1f}",
        f"Marks reserve: {summary.marks_reserve:,.0f}",
    ]
    if goal_day is None:
        lines.append("[yellow]Goal not reached in this forecast[/yellow]")
    else:
        lines.append(f"Goal reached: day {goal_day.day_index} ({goal_day.date})")
        if summary.goal_after_deadline:
            lines.append("[yellow]Goal falls after the end date[/yellow]")
    if summary.unreachable and goal_day is not None:
        lines.append("[yellow]Solver hit its ceiling; treat the rate as approximate[/yellow]")

    console.print(Panel("\n".join(lines), title="Summary", border_style="blue"))


def main() -> None:
    """Entry point for the CLI."""
    cli()


if __name__ == "__main__":
    main()
