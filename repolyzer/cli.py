"""CLI interface for repolyzer."""

import json
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape

from repolyzer import __version__
from repolyzer.analysis import StatsAccumulator
from repolyzer.git.errors import GitRepositoryError
from repolyzer.git.location import GitLocation
from repolyzer.git.repository import GitRepository
from repolyzer.logging_config import setup_logging
from repolyzer.models import AnalysisOptions, RepositoryStats
from repolyzer.visualization.charts import ChartGenerator
from repolyzer.visualization.report import ReportGenerator
from repolyzer.visualization.terminal import TerminalRenderer


console = Console()


def collect_stats(
    location: str, options: AnalysisOptions, verbose: bool = False
) -> tuple[str, RepositoryStats]:
    """Open the repository and run one pass over its history.

    Args:
        location: Local path or remote URL
        options: Optional aggregates to compute
        verbose: Print progress messages

    Returns:
        Repository name and the finished stats
    """
    git_location = GitLocation.parse(location)

    if verbose:
        action = "Cloning" if git_location.is_remote else "Opening"
        console.print(f"{action} repository: {escape(location)}")

    with GitRepository(git_location) as repo:
        if verbose:
            console.print("Walking commit history...")
        stats = StatsAccumulator(options).consume(repo.iter_commits())
        name = repo.name

    if verbose:
        console.print(f"Found {stats.commit_count} commits")

    return name, stats


@click.group()
@click.version_option(version=__version__)
def cli():
    """Repolyzer - analyze a git repository and display statistics about it."""
    pass


@cli.command(epilog="Options marked with a '*' may take more time and resources to compute, "
             "depending on the size of the repository.")
@click.argument("location")
@click.option("-c", "--commit-graph", is_flag=True, help="Enable the commit graph (similar to GitHub's)")
@click.option(
    "-e", "--extended-overview", is_flag=True,
    help="*Enable the extended overview instead of the general one",
)
@click.option("-n", "--no-overview", is_flag=True, help="Disable the general overview")
@click.option("-p", "--pie-chart", is_flag=True, help="Enable the pie chart")
@click.option("-w", "--week-day-stats", is_flag=True, help="*Enable the week day stats")
@click.option("-v", "--verbose", is_flag=True, help="Verbose output")
def analyze(location, commit_graph, extended_overview, no_overview, pie_chart, week_day_stats, verbose):
    """Print statistics for the repository at LOCATION.

    LOCATION is a local path or a remote HTTP(S) URL. Remote repositories
    are cloned to a temporary directory which is removed afterwards.
    """
    setup_logging(verbose)
    options = AnalysisOptions(
        churn=extended_overview,
        calendar=commit_graph,
        weekdays=week_day_stats,
    )

    try:
        _, stats = collect_stats(location, options, verbose)

        if stats.commit_count == 0:
            console.print("[yellow]No commits found.[/yellow]")
            return

        renderer = TerminalRenderer(stats, console)

        if extended_overview:
            renderer.extended_overview()
        elif not no_overview:
            renderer.general_overview()

        if pie_chart:
            renderer.pie_chart()

        if commit_graph:
            renderer.commit_graph()

        if week_day_stats:
            renderer.weekday_stats()

    except GitRepositoryError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)
    except Exception as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        if verbose:
            import traceback

            traceback.print_exc()
        sys.exit(1)


@cli.command()
@click.argument("location")
@click.option("-o", "--output", type=click.Path(), help="Output file or directory path")
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["html", "json", "png"]),
    default="html",
)
@click.option("-v", "--verbose", is_flag=True, help="Verbose output")
def report(location, output, output_format, verbose):
    """Write a full report for the repository at LOCATION.

    Computes every statistic, including code churn, the commit graph and the
    weekday histogram.
    """
    setup_logging(verbose)

    try:
        name, stats = collect_stats(location, AnalysisOptions.everything(), verbose)

        if stats.commit_count == 0:
            console.print("[yellow]No commits found.[/yellow]")
            return

        if verbose:
            console.print("Generating charts...")
        figures = ChartGenerator(stats).all_charts()

        report_gen = ReportGenerator(
            figures=figures,
            stats=stats,
            title=f"Repository Statistics: {name}",
            repo_location=location,
        )

        if output_format == "html":
            path = report_gen.write_html(output or "report.html")
            console.print(f"[green]Report written to {escape(str(path))}[/green]")

        elif output_format == "json":
            output = output or "report.json"
            Path(output).write_text(json.dumps(report_gen.to_json(), indent=2, default=str))
            console.print(f"[green]JSON written to {escape(output)}[/green]")

        elif output_format == "png":
            output = output or "charts"
            exported = report_gen.export_png(output)
            console.print(f"[green]Exported {len(exported)} charts to {escape(output)}/[/green]")
            if verbose:
                for path in exported:
                    console.print(f"  - {escape(path.name)}")

    except GitRepositoryError as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)
    except Exception as e:
        console.print(f"[red]Error: {escape(str(e))}[/red]")
        if verbose:
            import traceback

            traceback.print_exc()
        sys.exit(1)
