"""Tests for day entries and override helpers."""

from datetime import date

from honorcast.models.overrides import (
    DayEntry,
    DayOverrides,
    clear_override,
    overrides_by_day,
    set_override,
)


def honor_entry(day_index: int, honor: float) -> DayEntry:
    return DayEntry(
        day_index=day_index,
        overrides=DayOverrides(actual_honor_end_of_day=honor),
    )


class TestDayOverrides:
    """Tests for DayOverrides."""

    def test_empty(self):
        assert DayOverrides().is_empty

    def test_honor_only(self):
        assert not DayOverrides(actual_honor_end_of_day=0).is_empty

    def test_marks_only(self):
        assert not DayOverrides(actual_marks_end_of_day=12).is_empty


class TestOverridesByDay:
    """Tests for overrides_by_day."""

    def test_last_entry_wins(self):
        lookup = overrides_by_day([honor_entry(3, 1000), honor_entry(3, 2000)])
        assert lookup[3].actual_honor_end_of_day == 2000

    def test_entries_without_overrides_skipped(self):
        lookup = overrides_by_day([DayEntry(day_index=2), honor_entry(4, 500)])
        assert list(lookup) == [4]


class TestSetOverride:
    """Tests for set_override and clear_override."""

    def test_adds_sorted(self):
        entries = [honor_entry(5, 5000)]
        updated = set_override(
            entries,
            2,
            date(2024, 1, 19),
            DayOverrides(actual_marks_end_of_day=30),
        )

        assert [e.day_index for e in updated] == [2, 5]
        assert updated[0].date == date(2024, 1, 19)
        assert updated[0].overrides.actual_marks_end_of_day == 30
        # Input list untouched
        assert len(entries) == 1

    def test_replaces_same_day(self):
        entries = [honor_entry(2, 1000), honor_entry(5, 5000)]
        updated = set_override(entries, 2, None, DayOverrides(actual_honor_end_of_day=1500))

        assert len(updated) == 2
        assert overrides_by_day(updated)[2].actual_honor_end_of_day == 1500

    def test_clear(self):
        entries = [honor_entry(2, 1000), honor_entry(5, 5000)]
        updated = clear_override(entries, 2)

        assert [e.day_index for e in updated] == [5]
        assert len(entries) == 2

    def test_clear_missing_day(self):
        entries = [honor_entry(2, 1000)]
        assert clear_override(entries, 9) == entries
