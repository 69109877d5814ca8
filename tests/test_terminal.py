"""Tests for rich terminal output."""

import pytest
from rich.console import Console

from repolyzer.config import SHARE_BAR_WIDTH
from repolyzer.models import RepositoryStats
from repolyzer.visualization import TerminalRenderer
from repolyzer.visualization.terminal import format_ratio


@pytest.fixture
def console():
    return Console(record=True, width=200)


def rendered(console: Console) -> str:
    return console.export_text()


class TestFormatRatio:
    """Tests for the insertion/deletion ratio."""

    def test_ratio(self):
        assert format_ratio(10, 4) == "2.50"

    def test_zero_deletions(self):
        assert format_ratio(10, 0) == "n/a"

    def test_nothing_at_all(self):
        assert format_ratio(0, 0) == "n/a"


class TestOverviews:
    """Tests for the overview tables."""

    def test_general_overview(self, sample_repository_stats, console):
        TerminalRenderer(sample_repository_stats, console).general_overview()
        text = rendered(console)

        assert "Commit amount" in text
        assert "30" in text
        assert "14-11-2023 21:13:20" in text
        assert "Contributor amount" in text

    def test_extended_overview(self, sample_repository_stats, console):
        TerminalRenderer(sample_repository_stats, console).extended_overview()
        text = rendered(console)

        assert "1,200" in text
        assert "900" in text
        assert "4.00" in text

    def test_extended_overview_without_deletions(self, console):
        stats = RepositoryStats(commit_count=1, contributors={"A": 1}, total_lines_inserted=5)

        TerminalRenderer(stats, console).extended_overview()

        assert "n/a" in rendered(console)

    def test_empty_stats(self, console):
        TerminalRenderer(RepositoryStats(), console).general_overview()
        assert "Commit amount" in rendered(console)


class TestPieChart:
    """Tests for the contributor table."""

    def test_top_five_and_others(self, sample_repository_stats, console):
        TerminalRenderer(sample_repository_stats, console).pie_chart()
        text = rendered(console)

        for name in ("Alice", "Bob", "Carol", "Dave", "Erin", "Others"):
            assert name in text
        assert "Frank" not in text
        assert "33.3%" in text

    def test_share_bar_width(self, sample_repository_stats, console):
        TerminalRenderer(sample_repository_stats, console).pie_chart()
        lines = rendered(console).splitlines()

        alice = next(line for line in lines if "Alice" in line)
        assert "█" * round(10 / 30 * SHARE_BAR_WIDTH) in alice
        assert "█" * (round(10 / 30 * SHARE_BAR_WIDTH) + 1) not in alice

    def test_markup_in_names_is_escaped(self, console):
        stats = RepositoryStats(commit_count=1, contributors={"[bold]dev": 1})

        TerminalRenderer(stats, console).pie_chart()

        assert "[bold]dev" in rendered(console)


class TestCommitGraph:
    """Tests for the heat grid."""

    def test_legend(self, console):
        renderer = TerminalRenderer(RepositoryStats(), console)

        legend = renderer.distribution_legend([0, 2, 4, 6, 8])

        assert legend == "Distribution: ~ = 0 | · for <= 2, ▪ for <= 4, ● for <= 6, ⬟ for > 8"

    def test_empty_grid_is_all_lowest_level(self, now, console):
        stats = RepositoryStats(commit_count=0, now=now)

        rows = TerminalRenderer(stats, console).grid_rows()

        assert len(rows) == 7
        assert rows[0].startswith("Mon\t")
        for row in rows:
            symbols = row.split("\t", 1)[1].split()
            assert set(symbols) == {"~"}
            assert len(symbols) == 52

    def test_degenerate_grid_marks_any_commit_as_highest(self, now, console):
        days = [0] * 365
        days[0] = 1
        stats = RepositoryStats(commit_count=1, commits_per_calendar_day=tuple(days),
                                max_commits_in_a_day=1, now=now)

        rows = TerminalRenderer(stats, console).grid_rows()

        monday = rows[0].split("\t", 1)[1].split()
        assert monday[0] == "⬟"
        assert set(monday[1:]) == {"~"}

    def test_commit_graph_header(self, sample_repository_stats, console):
        TerminalRenderer(sample_repository_stats, console).commit_graph()
        text = rendered(console)

        assert "Commits in the last year: 17" in text
        assert "Longest Streak: 3 days" in text
        assert "Current Streak: 4 days" in text
        assert "Max a day: 10" in text
        assert "Jan" in text


class TestWeekdayStats:
    """Tests for the weekday bars."""

    def test_bars_scale_to_maximum(self, sample_repository_stats, console):
        TerminalRenderer(sample_repository_stats, console).weekday_stats()
        lines = rendered(console).splitlines()

        friday = next(line for line in lines if "Fri" in line)
        assert friday.endswith("|" + "█" * 20)

    def test_no_commits(self, console):
        TerminalRenderer(RepositoryStats(), console).weekday_stats()
        text = rendered(console)

        assert "Commits per weekday" in text
        assert "█" not in text
