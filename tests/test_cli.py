"""Tests for the command-line interface."""

import json
import logging

import pytest
from click.testing import CliRunner

from honorcast.cli.main import cli
from honorcast.io.plan_io import load_plan, save_plan
from honorcast.models.overrides import DayEntry, DayOverrides


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def restore_logging():
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield
    root.handlers[:] = handlers
    root.setLevel(level)


@pytest.fixture
def config_file(simple_config, tmp_path):
    path = tmp_path / "config.json"
    simple_config.to_file(path)
    return path


class TestInit:
    """Tests for the init command."""

    def test_writes_default_config(self, runner, tmp_path):
        path = tmp_path / "honorcast.yaml"
        result = runner.invoke(cli, ["init", str(path)])

        assert result.exit_code == 0
        assert path.exists()

    def test_refuses_overwrite(self, runner, config_file):
        result = runner.invoke(cli, ["init", str(config_file)])
        assert result.exit_code == 1

    def test_force_overwrite(self, runner, config_file):
        result = runner.invoke(cli, ["init", str(config_file), "--force"])
        assert result.exit_code == 0
        assert json.loads(config_file.read_text())["goal"]["honor_target"] == 75000


class TestValidate:
    """Tests for the validate command."""

    def test_valid(self, runner, config_file):
        result = runner.invoke(cli, ["validate", str(config_file)])
        assert result.exit_code == 0
        assert "valid" in result.output

    def test_invalid(self, runner, simple_config_data, tmp_path):
        simple_config_data["win_rate"] = 1.5
        path = tmp_path / "bad.json"
        path.write_text(json.dumps(simple_config_data))

        result = runner.invoke(cli, ["validate", str(path)])
        assert result.exit_code == 1
        assert "win_rate" in result.output

    def test_lists_every_error(self, runner, simple_config_data, tmp_path):
        simple_config_data["win_rate"] = 1.5
        simple_config_data["goal"]["honor_target"] = 0
        path = tmp_path / "bad.json"
        path.write_text(json.dumps(simple_config_data))

        result = runner.invoke(cli, ["validate", str(path)])
        assert result.exit_code == 1
        assert "win_rate" in result.output
        assert "goal.honor_target" in result.output

    def test_missing_file(self, runner, tmp_path):
        result = runner.invoke(cli, ["validate", str(tmp_path / "missing.json")])
        assert result.exit_code != 0


class TestForecast:
    """Tests for the forecast command."""

    def test_auto_forecast(self, runner, config_file):
        result = runner.invoke(cli, ["forecast", str(config_file)])

        assert result.exit_code == 0
        assert "Forecast" in result.output
        assert "Goal reached" in result.output

    def test_manual_games(self, runner, config_file):
        result = runner.invoke(cli, ["forecast", str(config_file), "--games", "5"])

        assert result.exit_code == 0
        assert "Games per day: 5.0" in result.output

    def test_plan_with_entries(self, runner, simple_config, tmp_path):
        entries = [DayEntry(day_index=1, overrides=DayOverrides(actual_honor_end_of_day=10000))]
        path = save_plan(tmp_path / "plan.json", simple_config, entries)

        result = runner.invoke(cli, ["forecast", str(path)])
        assert result.exit_code == 0
        assert "Goal reached" in result.output

    def test_export(self, runner, config_file, tmp_path):
        out = tmp_path / "out.json"
        result = runner.invoke(cli, ["forecast", str(config_file), "--export", str(out)])

        assert result.exit_code == 0
        assert json.loads(out.read_text())["version"] == 1


class TestSolve:
    """Tests for the solve command."""

    def test_prints_rate(self, runner, config_file):
        result = runner.invoke(cli, ["solve", str(config_file)])

        assert result.exit_code == 0
        assert float(result.output.strip()) > 0

    def test_unreachable(self, runner, simple_config, tmp_path):
        path = tmp_path / "config.json"
        simple_config.merge({"goal": {"honor_target": 1e12}}).to_file(path)

        result = runner.invoke(cli, ["solve", str(path)])
        assert result.exit_code == 2
        assert "out of reach" in result.output

class TestRecord:
    """Tests for the record command."""

    def test_records_into_config_file(self, runner, config_file):
        result = runner.invoke(cli, ["record", str(config_file), "3", "--honor", "4000"])
        assert result.exit_code == 0

        plan = load_plan(config_file)
        assert len(plan.entries) == 1
        entry = plan.entries[0]
        assert entry.day_index == 3
        assert entry.date.isoformat() == "2024-01-20"
        assert entry.overrides.actual_honor_end_of_day == 4000

    def test_keeps_earlier_values(self, runner, config_file):
        runner.invoke(cli, ["record", str(config_file), "3", "--honor", "4000"])
        result = runner.invoke(cli, ["record", str(config_file), "3", "--marks", "12"])
        assert result.exit_code == 0

        overrides = load_plan(config_file).entries[0].overrides
        assert overrides.actual_honor_end_of_day == 4000
        assert overrides.actual_marks_end_of_day == 12

    def test_clear(self, runner, config_file):
        runner.invoke(cli, ["record", str(config_file), "3", "--honor", "4000"])
        result = runner.invoke(cli, ["record", str(config_file), "3", "--clear"])

        assert result.exit_code == 0
        assert load_plan(config_file).entries == []

    def test_output_leaves_source(self, runner, config_file, tmp_path):
        out = tmp_path / "plan.yml"
        result = runner.invoke(
            cli, ["record", str(config_file), "1", "--marks", "20", "-o", str(out)]
        )

        assert result.exit_code == 0
        assert "config" not in json.loads(config_file.read_text())
        assert load_plan(out).entries[0].overrides.actual_marks_end_of_day == 20

    def test_requires_a_value(self, runner, config_file):
        result = runner.invoke(cli, ["record", str(config_file), "3"])
        assert result.exit_code == 1

    def test_day_must_be_positive(self, runner, config_file):
        result = runner.invoke(cli, ["record", str(config_file), "0", "--honor", "1"])
        assert result.exit_code != 0

    def test_forecast_uses_recorded_day(self, runner, config_file):
        runner.invoke(cli, ["record", str(config_file), "1", "--honor", "80000"])
        result = runner.invoke(cli, ["forecast", str(config_file), "--games", "0"])

        assert result.exit_code == 0
        assert "Goal reached: day 1" in result.output


def test_verbose_on_repeated_runs(runner, config_file, restore_logging):
    runner.invoke(cli, ["solve", str(config_file)])
    assert logging.getLogger().level == logging.WARNING

    result = runner.invoke(cli, ["--verbose", "solve", str(config_file)])
    assert result.exit_code == 0
    assert logging.getLogger().level == logging.DEBUG


def test_info(runner):
    result = runner.invoke(cli, ["info"])
    assert result.exit_code == 0
    assert "HONORCAST" in result.output


def test_version(runner):
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert "0.1.0" in result.output
