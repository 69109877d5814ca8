"""Analysis module."""

from repolyzer.analysis.accumulator import StatsAccumulator, gather_stats
from repolyzer.analysis.calendar import (
    intensity_level,
    longest_streak,
    symbol_distribution,
    weekday_grid,
    weekday_row,
)
from repolyzer.analysis.ranking import top_contributors

__all__ = [
    "StatsAccumulator",
    "gather_stats",
    "intensity_level",
    "longest_streak",
    "symbol_distribution",
    "weekday_grid",
    "weekday_row",
    "top_contributors",
]
