"""Tests for plan file import/export."""

import json
from datetime import date

import pytest

from honorcast.io.plan_io import (
    CURRENT_SCHEMA_VERSION,
    PlanLoadError,
    PlanSaveError,
    export_filename,
    load_plan,
    migrate,
    save_plan,
)
from honorcast.models.overrides import DayEntry, DayOverrides


@pytest.fixture
def entries():
    return [
        DayEntry(
            day_index=2,
            date=date(2024, 1, 19),
            overrides=DayOverrides(actual_honor_end_of_day=4000),
        ),
        DayEntry(
            day_index=5,
            date=date(2024, 1, 22),
            overrides=DayOverrides(actual_marks_end_of_day=12),
        ),
    ]


class TestSaveAndLoad:
    """Tests for save_plan and load_plan."""

    def test_json_round_trip(self, simple_config, entries, tmp_path):
        path = save_plan(tmp_path / "plan.json", simple_config, entries)
        plan = load_plan(path)

        assert plan.version == CURRENT_SCHEMA_VERSION
        assert plan.config == simple_config
        assert plan.entries == entries
        assert plan.last_updated

    def test_yaml_round_trip(self, simple_config, entries, tmp_path):
        path = save_plan(tmp_path / "plan.yml", simple_config, entries)
        plan = load_plan(path)

        assert plan.config == simple_config
        assert plan.entries == entries

    def test_creates_parent_directory(self, simple_config, tmp_path):
        path = save_plan(tmp_path / "nested" / "plan.json", simple_config)
        assert path.exists()

    def test_bare_config_file(self, simple_config, tmp_path):
        path = tmp_path / "config.json"
        simple_config.to_file(path)

        plan = load_plan(path)
        assert plan.config == simple_config
        assert plan.entries == []

    def test_missing_file(self, tmp_path):
        with pytest.raises(PlanLoadError, match="not found"):
            load_plan(tmp_path / "missing.json")

    def test_corrupt_json(self, tmp_path):
        path = tmp_path / "plan.json"
        path.write_text("{not json")
        with pytest.raises(PlanLoadError):
            load_plan(path)

    def test_unsupported_format(self, simple_config, tmp_path):
        with pytest.raises(PlanSaveError):
            save_plan(tmp_path / "plan.csv", simple_config)


class TestMigrate:
    """Tests for migrate."""

    def test_missing_version_treated_as_current(self, simple_config_data):
        plan = migrate({"config": simple_config_data, "entries": []})
        assert plan.version == CURRENT_SCHEMA_VERSION

    def test_keeps_last_updated(self, simple_config_data):
        plan = migrate({
            "version": 1,
            "config": simple_config_data,
            "last_updated": "2024-01-20T10:00:00",
        })
        assert plan.last_updated == "2024-01-20T10:00:00"

    def test_non_list_entries_dropped(self, simple_config_data):
        plan = migrate({"version": 1, "config": simple_config_data, "entries": "oops"})
        assert plan.entries == []

    def test_newer_version_rejected(self, simple_config_data):
        with pytest.raises(PlanLoadError, match="newer than supported"):
            migrate({"version": 2, "config": simple_config_data})

    def test_non_dict_rejected(self):
        with pytest.raises(PlanLoadError, match="Invalid data format"):
            migrate(["not", "a", "plan"])

    def test_missing_config_rejected(self):
        with pytest.raises(PlanLoadError, match="Missing or invalid config"):
            migrate({"version": 1, "entries": []})

    def test_invalid_config_rejected(self, simple_config_data):
        simple_config_data["win_rate"] = 1.5
        with pytest.raises(PlanLoadError, match="win_rate"):
            migrate({"version": 1, "config": simple_config_data})

    def test_invalid_config_kept_without_validation(self, simple_config_data):
        simple_config_data["win_rate"] = 1.5
        plan = migrate({"version": 1, "config": simple_config_data}, validate=False)
        assert plan.config.win_rate == 1.5

    def test_malformed_entry_rejected(self, simple_config_data):
        with pytest.raises(PlanLoadError):
            migrate({
                "version": 1,
                "config": simple_config_data,
                "entries": [{"day_index": 0}],
            })


class TestExportFilename:
    """Tests for export_filename."""

    def test_dated_name(self):
        assert export_filename(date(2024, 1, 18)) == "honorcast-plan-2024-01-18.json"

    def test_saved_file_is_json(self, simple_config, tmp_path):
        path = save_plan(tmp_path / export_filename(date(2024, 1, 18)), simple_config)
        assert json.loads(path.read_text())["version"] == CURRENT_SCHEMA_VERSION
