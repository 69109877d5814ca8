"""Tests for calendar heat grid calculations."""

from datetime import date

import pytest

from repolyzer.analysis.calendar import (
    calendar_index,
    commits_last_year,
    intensity_level,
    longest_streak,
    max_commits_in_a_day,
    symbol_distribution,
    utc_date,
    weekday_column_count,
    weekday_grid,
    weekday_row,
)

# Weekday of the pinned clock (2023-11-14)
TUESDAY = 1


class TestCalendarIndex:
    """Tests for mapping timestamps to calendar slots."""

    def test_epoch(self):
        assert calendar_index(0) == 0

    def test_pinned_clock(self, now):
        assert calendar_index(now) == 330

    def test_same_day_same_slot(self, now):
        """Timestamps of one UTC day share a slot."""
        day_start = now - now % 86_400
        assert calendar_index(day_start) == calendar_index(day_start + 86_399)

    def test_wraps_after_365_days(self):
        assert calendar_index(365 * 86_400) == 0
        assert calendar_index(364 * 86_400) == 364


class TestSummaries:
    """Tests for max and total over the calendar."""

    def test_all_zero(self):
        days = [0] * 365
        assert max_commits_in_a_day(days) == 0
        assert commits_last_year(days) == 0

    def test_values(self):
        days = [0] * 365
        days[3] = 7
        days[200] = 2
        assert max_commits_in_a_day(days) == 7
        assert commits_last_year(days) == 9


class TestLongestStreak:
    """Tests for the slot streak."""

    def test_no_commits(self):
        assert longest_streak([0] * 365) == 0

    def test_every_day(self):
        assert longest_streak([1] * 365) == 365

    def test_single_zero_breaks_run(self):
        days = [0] * 365
        days[10:15] = [1, 2, 0, 1, 1]
        assert longest_streak(days) == 2

    def test_longest_of_several_runs(self):
        days = [0] * 365
        days[0:3] = [1, 1, 1]
        days[50:55] = [4, 1, 2, 9, 1]
        days[100:102] = [1, 1]
        assert longest_streak(days) == 5

    def test_run_reaching_last_slot_counts(self):
        days = [0] * 365
        days[360:] = [1] * 5
        assert longest_streak(days) == 5

    def test_run_does_not_wrap_to_slot_zero(self):
        """Scanning is in index order only; slot 364 and 0 are not joined."""
        days = [0] * 365
        days[0] = 1
        days[364] = 1
        assert longest_streak(days) == 1


class TestSymbolDistribution:
    """Tests for intensity bucket bounds."""

    def test_even_split(self):
        assert symbol_distribution(10) == [0, 2, 4, 6, 8]

    def test_truncating_division(self):
        assert symbol_distribution(23) == [0, 4, 8, 12, 16]

    @pytest.mark.parametrize("max_a_day", [0, 1, 4])
    def test_degenerate_bounds(self, max_a_day):
        """Fewer commits than levels collapse every bound to 0."""
        assert symbol_distribution(max_a_day) == [0, 0, 0, 0, 0]


class TestIntensityLevel:
    """Tests for mapping day counts to levels."""

    def test_levels_with_even_split(self):
        distribution = [0, 2, 4, 6, 8]
        assert intensity_level(0, distribution) == 0
        assert intensity_level(1, distribution) == 1
        assert intensity_level(2, distribution) == 1
        assert intensity_level(3, distribution) == 2
        assert intensity_level(8, distribution) == 4
        assert intensity_level(10, distribution) == 4

    def test_degenerate_distribution(self):
        """Any nonzero day gets the highest level when bounds collapse."""
        distribution = symbol_distribution(3)
        assert intensity_level(0, distribution) == 0
        assert intensity_level(1, distribution) == 4
        assert intensity_level(3, distribution) == 4

    def test_all_zero_calendar(self):
        """An empty calendar maps every day to level 0."""
        days = [0] * 365
        distribution = symbol_distribution(max_commits_in_a_day(days))
        assert {intensity_level(count, distribution) for count in days} == {0}


class TestWeekdayGrid:
    """Tests for the stride-7 weekday rows."""

    def test_utc_date(self, now):
        assert utc_date(now) == date(2023, 11, 14)

    def test_column_counts(self, now):
        """Today's weekday appears 53 times in 365 days, others 52."""
        today = utc_date(now)
        counts = [weekday_column_count(today, weekday) for weekday in range(7)]

        assert counts[TUESDAY] == 53
        assert [c for i, c in enumerate(counts) if i != TUESDAY] == [52] * 6
        assert sum(counts) == 365

    def test_monday_row_uses_stride_seven(self, now):
        days = list(range(365))
        row = weekday_row(days, 0, utc_date(now))

        assert len(row) == 52
        assert row[:3] == [0, 7, 14]
        assert row[-1] == 357

    def test_row_ends_at_calendar_edge(self, now):
        """The 53rd Tuesday column would index slot 365 and is dropped."""
        days = list(range(365))
        row = weekday_row(days, TUESDAY, utc_date(now))

        assert len(row) == 52
        assert row[0] == 1
        assert row[-1] == 358

    def test_sunday_row(self, now):
        days = list(range(365))
        row = weekday_row(days, 6, utc_date(now))

        assert row[0] == 6
        assert row[-1] == 363

    def test_grid_has_seven_rows(self, now):
        grid = weekday_grid([0] * 365, utc_date(now))

        assert len(grid) == 7
        assert all(set(row) == {0} for row in grid)
