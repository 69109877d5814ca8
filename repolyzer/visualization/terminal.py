"""Rich terminal output for repository statistics."""

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from repolyzer.analysis.calendar import (
    intensity_level,
    symbol_distribution,
    utc_date,
    weekday_row,
)
from repolyzer.analysis.ranking import top_contributors
from repolyzer.config import (
    INTENSITY_SYMBOLS,
    SHARE_BAR_WIDTH,
    SLICE_COLORS,
    WEEKDAY_BAR_WIDTH,
    WEEKDAY_NAMES,
)
from repolyzer.models import RepositoryStats

MONTH_HEADER = "      Jan      Feb      Mar      Apr      May      Jun      Jul      Aug      Sep      Oct      Nov     Dec"


def format_ratio(inserted: int, deleted: int) -> str:
    """Insertions per deletion, or "n/a" when nothing was deleted."""
    if deleted == 0:
        return "n/a"
    return f"{inserted / deleted:.2f}"


class TerminalRenderer:
    """Print RepositoryStats to the terminal.

    Only reads the stats; ranking and grid layout come from the analysis
    module.
    """

    def __init__(self, stats: RepositoryStats, console: Console | None = None):
        self.stats = stats
        self.console = console or Console()

    def _overview_table(self, title: str) -> Table:
        table = Table(title=title)
        table.add_column("Metric", style="cyan")
        table.add_column("Value", style="green")

        last_commit = self.stats.last_commit_date
        table.add_row("Commit amount", f"{self.stats.commit_count:,}")
        table.add_row(
            "Last commit",
            last_commit.strftime("%d-%m-%Y %H:%M:%S") if last_commit else "-",
        )
        table.add_row("Contributor amount", f"{self.stats.contributor_count:,}")
        return table

    def general_overview(self) -> None:
        self.console.print(self._overview_table("Overall commit stats"))

    def extended_overview(self) -> None:
        """Overview plus code churn totals."""
        table = self._overview_table("Overall commit stats")
        stats = self.stats
        table.add_row("Files changed", f"{stats.total_files_changed:,}")
        table.add_row("Lines inserted", f"{stats.total_lines_inserted:,}")
        table.add_row("Lines removed", f"{stats.total_lines_deleted:,}")
        table.add_row("Total lines (delta)", f"{stats.net_lines:,}")
        table.add_row(
            "Add./Del. ratio",
            format_ratio(stats.total_lines_inserted, stats.total_lines_deleted),
        )
        self.console.print(table)

    def pie_chart(self) -> None:
        """Contributor shares: top five plus everyone else."""
        table = Table(title="Commit pie chart")
        table.add_column("Contributor", style="cyan")
        table.add_column("Commits", justify="right", style="green")
        table.add_column("Share", justify="right", style="yellow")
        table.add_column("")

        total = self.stats.commit_count
        for i, (name, commits) in enumerate(top_contributors(self.stats.contributors)):
            share = commits / total if total else 0.0
            color = SLICE_COLORS[i % len(SLICE_COLORS)]
            bar = "█" * round(share * SHARE_BAR_WIDTH)
            table.add_row(
                escape(name),
                f"{commits:,}",
                f"{share:.1%}",
                f"[{color}]{bar}[/{color}]",
            )

        self.console.print(table)

    def distribution_legend(self, distribution: list[int]) -> str:
        """Describe which commit counts each grid symbol stands for."""
        last = len(distribution) - 1
        bounds = [
            f"{INTENSITY_SYMBOLS[i]} for <= {distribution[i]}" for i in range(1, last)
        ]
        bounds.append(f"{INTENSITY_SYMBOLS[last]} for > {distribution[last]}")
        return (
            f"Distribution: {INTENSITY_SYMBOLS[0]} = {distribution[0]} | "
            + ", ".join(bounds)
        )

    def grid_rows(self) -> list[str]:
        """One line of symbols per weekday, Monday first."""
        stats = self.stats
        distribution = symbol_distribution(stats.max_commits_in_a_day)
        today = utc_date(stats.now)

        lines = []
        for weekday, name in enumerate(WEEKDAY_NAMES):
            symbols = [
                INTENSITY_SYMBOLS[intensity_level(count, distribution)]
                for count in weekday_row(stats.commits_per_calendar_day, weekday, today)
            ]
            lines.append(f"{name}\t" + "".join(f" {s}" for s in symbols))
        return lines

    def commit_graph(self) -> None:
        """Heat grid of the trailing year, one row per weekday."""
        stats = self.stats
        distribution = symbol_distribution(stats.max_commits_in_a_day)

        self.console.print(self.distribution_legend(distribution), markup=False)
        self.console.print()
        self.console.rule()
        self.console.print(
            f"Commits in the last year: {stats.commits_last_year} | "
            f"Longest Streak: {stats.longest_commit_streak} days | "
            f"Current Streak: {stats.current_commit_streak} days | "
            f"Max a day: {stats.max_commits_in_a_day}",
            markup=False,
        )
        self.console.rule()
        self.console.print(MONTH_HEADER, markup=False, highlight=False)
        for line in self.grid_rows():
            self.console.print(line, markup=False, highlight=False)
        self.console.rule()

    def weekday_stats(self) -> None:
        """Commits per weekday as horizontal bars."""
        counts = self.stats.commits_per_weekday
        max_commits = max(counts, default=0)

        self.console.print("Commits per weekday:")
        for name, count in zip(WEEKDAY_NAMES, counts):
            width = int(count / max_commits * WEEKDAY_BAR_WIDTH) if max_commits else 0
            self.console.print(f"\t{name}\t{count}\t|{'█' * width}", highlight=False)
