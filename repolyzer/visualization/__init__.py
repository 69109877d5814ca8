"""Visualization module."""

from repolyzer.visualization.charts import ChartGenerator
from repolyzer.visualization.report import ReportGenerator
from repolyzer.visualization.terminal import TerminalRenderer

__all__ = ["ChartGenerator", "ReportGenerator", "TerminalRenderer"]
