"""HTML report generator using Jinja2."""

from datetime import datetime, timezone
from pathlib import Path

from jinja2 import Environment, FileSystemLoader
import plotly.graph_objects as go

from repolyzer.analysis.ranking import top_contributors
from repolyzer.models import RepositoryStats
from repolyzer.visualization.terminal import format_ratio


class ReportGenerator:
    """Generate HTML reports from charts and statistics.

    Uses Jinja2 templates to create self-contained HTML reports
    with embedded Plotly charts.
    """

    def __init__(
        self,
        figures: list[go.Figure],
        stats: RepositoryStats | None = None,
        title: str = "Git Repository Statistics",
        repo_location: str | None = None,
    ):
        """Initialize the report generator.

        Args:
            figures: List of Plotly Figure objects to include
            stats: Optional RepositoryStats for summary section
            title: Report title
            repo_location: Optional repository path or URL for display
        """
        self.figures = figures
        self.stats = stats
        self.title = title
        self.repo_location = repo_location

        template_dir = Path(__file__).parent / "templates"
        self.env = Environment(
            loader=FileSystemLoader(template_dir),
            autoescape=True,
        )

    def generate_html(self) -> str:
        """Generate HTML report with embedded charts.

        Returns:
            Complete HTML document as string
        """
        template = self.env.get_template("report.html")

        # Template loads Plotly.js from the CDN
        chart_htmls = [
            fig.to_html(full_html=False, include_plotlyjs=False) for fig in self.figures
        ]

        contributors = []
        if self.stats:
            contributors = top_contributors(self.stats.contributors)

        return template.render(
            title=self.title,
            repo_location=self.repo_location,
            summary=self._build_summary(),
            contributors=contributors,
            charts=chart_htmls,
            generated_at=datetime.now(timezone.utc).strftime("%Y-%m-%d %H:%M:%S UTC"),
        )

    def write_html(self, output_path: str | Path) -> Path:
        """Write HTML report to file.

        Args:
            output_path: Path to write the HTML file

        Returns:
            Path of the written file
        """
        output_path = Path(output_path)
        output_path.parent.mkdir(parents=True, exist_ok=True)
        output_path.write_text(self.generate_html(), encoding="utf-8")
        return output_path

    def export_png(self, output_dir: str | Path) -> list[Path]:
        """Export charts as PNG files.

        Args:
            output_dir: Directory to write PNG files

        Returns:
            List of paths to generated PNG files
        """
        output_path = Path(output_dir)
        output_path.mkdir(parents=True, exist_ok=True)

        exported = []
        for i, fig in enumerate(self.figures):
            title = fig.layout.title.text if fig.layout.title.text else f"chart_{i}"
            png_path = output_path / f"{self._sanitize_filename(title)}.png"
            fig.write_image(str(png_path), width=1200, height=600, scale=2)
            exported.append(png_path)

        return exported

    def to_json(self) -> dict:
        """Export report data as JSON-serializable dict.

        Returns:
            Dictionary with summary, raw stats and chart definitions
        """
        result = {
            "title": self.title,
            "summary": self._build_summary(),
            "stats": self.stats.to_dict() if self.stats else None,
            "charts": [],
        }

        for fig in self.figures:
            result["charts"].append(
                {
                    "title": fig.layout.title.text if fig.layout.title.text else None,
                    "figure": fig.to_json(),
                }
            )

        return result

    def _build_summary(self) -> dict[str, str]:
        """Build summary dictionary for template.

        Returns:
            Dictionary of summary key-value pairs
        """
        if not self.stats:
            return {}

        stats = self.stats
        last_commit = stats.last_commit_date
        summary = {
            "Commit amount": f"{stats.commit_count:,}",
            "Last commit": last_commit.strftime("%d-%m-%Y %H:%M:%S") if last_commit else "-",
            "Contributor amount": f"{stats.contributor_count:,}",
            "Files changed": f"{stats.total_files_changed:,}",
            "Lines inserted": f"{stats.total_lines_inserted:,}",
            "Lines removed": f"{stats.total_lines_deleted:,}",
            "Total lines (delta)": f"{stats.net_lines:,}",
            "Add./Del. ratio": format_ratio(
                stats.total_lines_inserted, stats.total_lines_deleted
            ),
            "Commits in the last year": f"{stats.commits_last_year:,}",
            "Longest streak": f"{stats.longest_commit_streak} days",
            "Current streak": f"{stats.current_commit_streak} days",
            "Max a day": str(stats.max_commits_in_a_day),
        }

        return summary

    def _sanitize_filename(self, title: str) -> str:
        """Sanitize a string for use as a filename.

        Args:
            title: String to sanitize

        Returns:
            Safe filename string
        """
        safe = "".join(c if c.isalnum() or c in "._- " else "_" for c in title)
        return safe.strip().replace(" ", "_").lower()
