"""Plotly chart generators."""

import plotly.graph_objects as go

from repolyzer.analysis.calendar import utc_date, weekday_grid
from repolyzer.analysis.ranking import top_contributors
from repolyzer.config import SLICE_COLORS, WEEKDAY_NAMES
from repolyzer.models import RepositoryStats


class ChartGenerator:
    """Generate Plotly charts from repository statistics.

    All chart methods return Plotly Figure objects that can be
    rendered to HTML, PNG, or displayed interactively.
    """

    # Color palette for charts
    COLORS = {
        "primary": "#2563eb",
        "success": "#16a34a",
        "danger": "#dc2626",
    }

    def __init__(self, stats: RepositoryStats):
        """Initialize the chart generator.

        Args:
            stats: RepositoryStats object with aggregated metrics
        """
        self.stats = stats

    def contributor_pie(self) -> go.Figure:
        """Generate pie chart of the top contributors.

        Returns:
            Plotly Figure with the top five contributors and "Others"
        """
        if not self.stats.contributors:
            return self._empty_figure("No contributor data available")

        ranked = top_contributors(self.stats.contributors)
        labels = [name for name, _ in ranked]
        values = [count for _, count in ranked]

        fig = go.Figure(
            data=[
                go.Pie(
                    labels=labels,
                    values=values,
                    marker=dict(colors=SLICE_COLORS[: len(labels)]),
                    textinfo="label+percent",
                    hovertemplate="%{label}<br>%{value} commits (%{percent})<extra></extra>",
                )
            ]
        )

        fig.update_layout(
            title="Commit Pie Chart",
            template="plotly_white",
            showlegend=True,
        )

        return fig

    def commit_graph(self) -> go.Figure:
        """Generate heat grid of the trailing year.

        Returns:
            Plotly Figure with one row per weekday and one column per week
        """
        if self.stats.commits_last_year == 0:
            return self._empty_figure("No commits in the last year")

        rows = weekday_grid(self.stats.commits_per_calendar_day, utc_date(self.stats.now))
        width = max(len(row) for row in rows)
        # Pad short rows so the heatmap stays rectangular
        z = [row + [None] * (width - len(row)) for row in rows]

        fig = go.Figure(
            data=[
                go.Heatmap(
                    z=z,
                    y=WEEKDAY_NAMES,
                    colorscale="Greens",
                    xgap=2,
                    ygap=2,
                    colorbar=dict(title="Commits"),
                    hovertemplate="%{y}, week %{x}<br>%{z} commits<extra></extra>",
                )
            ]
        )

        fig.update_layout(
            title="Commit Graph",
            xaxis_title="Week",
            template="plotly_white",
            yaxis=dict(autorange="reversed"),
        )

        fig.add_annotation(
            text=(
                f"Longest streak: {self.stats.longest_commit_streak} days | "
                f"Current streak: {self.stats.current_commit_streak} | "
                f"Max a day: {self.stats.max_commits_in_a_day}"
            ),
            xref="paper",
            yref="paper",
            x=0.5,
            y=1.08,
            showarrow=False,
            font=dict(size=12),
        )

        return fig

    def weekday_chart(self) -> go.Figure:
        """Generate commits per weekday bar chart.

        Returns:
            Plotly Figure with one bar per weekday
        """
        if not any(self.stats.commits_per_weekday):
            return self._empty_figure("No weekday data available")

        fig = go.Figure(
            data=[
                go.Bar(
                    x=WEEKDAY_NAMES,
                    y=list(self.stats.commits_per_weekday),
                    marker_color=self.COLORS["primary"],
                    hovertemplate="%{x}<br>%{y} commits<extra></extra>",
                )
            ]
        )

        fig.update_layout(
            title="Commits per Weekday",
            xaxis_title="Weekday",
            yaxis_title="Commits",
            template="plotly_white",
        )

        return fig

    def code_churn_chart(self) -> go.Figure:
        """Generate insertions vs deletions chart.

        Returns:
            Plotly Figure showing code churn as grouped bars
        """
        fig = go.Figure(
            data=[
                go.Bar(
                    name="Lines Inserted",
                    x=["Code Changes"],
                    y=[self.stats.total_lines_inserted],
                    marker_color=self.COLORS["success"],
                ),
                go.Bar(
                    name="Lines Removed",
                    x=["Code Changes"],
                    y=[self.stats.total_lines_deleted],
                    marker_color=self.COLORS["danger"],
                ),
            ]
        )

        fig.update_layout(
            title="Code Churn",
            yaxis_title="Lines",
            template="plotly_white",
            barmode="group",
            showlegend=True,
        )

        net_change = self.stats.net_lines
        sign = "+" if net_change >= 0 else ""
        fig.add_annotation(
            text=f"Net: {sign}{net_change:,} lines",
            xref="paper",
            yref="paper",
            x=0.5,
            y=1.05,
            showarrow=False,
            font=dict(size=12),
        )

        return fig

    def all_charts(self) -> list[go.Figure]:
        """Generate all available charts.

        Returns:
            List of Plotly Figure objects
        """
        return [
            self.contributor_pie(),
            self.commit_graph(),
            self.weekday_chart(),
            self.code_churn_chart(),
        ]

    def _empty_figure(self, message: str) -> go.Figure:
        """Create an empty figure with a message.

        Args:
            message: Message to display

        Returns:
            Empty Plotly Figure with centered message
        """
        fig = go.Figure()
        fig.add_annotation(
            text=message,
            xref="paper",
            yref="paper",
            x=0.5,
            y=0.5,
            showarrow=False,
            font=dict(size=16, color="#6b7280"),
        )
        fig.update_layout(
            template="plotly_white",
            xaxis=dict(showgrid=False, showticklabels=False, zeroline=False),
            yaxis=dict(showgrid=False, showticklabels=False, zeroline=False),
        )
        return fig
