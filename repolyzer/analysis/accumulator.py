"""Single-pass statistics over a commit stream."""

import time
from collections import defaultdict
from datetime import datetime, timezone
from typing import Iterable, Optional

from repolyzer.analysis import calendar
from repolyzer.config import CALENDAR_DAYS, SECONDS_PER_DAY, SECONDS_PER_YEAR, UNKNOWN_AUTHOR
from repolyzer.logging_config import get_logger
from repolyzer.models import AnalysisOptions, Commit, RepositoryStats

logger = get_logger(__name__)


class StatsAccumulator:
    """Accumulate repository statistics from a stream of commits.

    Commits are consumed once, in the order the source yields them. The
    wall-clock time used for the trailing-year window is fixed when the
    accumulator is created, so every commit of a pass sees the same window.
    """

    def __init__(self, options: Optional[AnalysisOptions] = None, now: Optional[int] = None):
        """Initialize the accumulator.

        Args:
            options: Which optional aggregates to compute (default: none)
            now: Seconds since epoch to pin the trailing year to
                 (defaults to the current time)
        """
        self.options = options or AnalysisOptions()
        self.now = int(time.time()) if now is None else now
        self._window_start = self.now - SECONDS_PER_YEAR

        self._commit_count = 0
        self._last_commit = 0
        self._contributors: defaultdict[str, int] = defaultdict(int)

        self._files_changed = 0
        self._lines_inserted = 0
        self._lines_deleted = 0

        self._per_day = [0] * CALENDAR_DAYS
        self._per_weekday = [0] * 7

        self._previous_timestamp: Optional[int] = None
        self._running_streak = 0
        self._best_running_streak = 0

        self._stats: RepositoryStats | None = None

    def add(self, commit: Commit) -> None:
        """Fold one commit into the running aggregates.

        Args:
            commit: Commit to account for

        Raises:
            RuntimeError: If the accumulator was already finalized
        """
        if self._stats is not None:
            raise RuntimeError("Cannot add commits after finalize()")

        self._commit_count += 1
        author = UNKNOWN_AUTHOR if commit.author is None else commit.author
        self._contributors[author] += 1
        self._last_commit = max(self._last_commit, commit.timestamp)

        if self.options.churn:
            self._add_churn(commit)

        if self.options.calendar:
            self._add_calendar(commit.timestamp)

        if self.options.weekdays:
            weekday = datetime.fromtimestamp(commit.timestamp, tz=timezone.utc).weekday()
            self._per_weekday[weekday] += 1

    def _add_churn(self, commit: Commit) -> None:
        diff = commit.diff()
        if diff is None:
            # Root commit
            return

        self._files_changed += diff.files_changed
        self._lines_inserted += diff.lines_inserted
        self._lines_deleted += diff.lines_deleted

    def _add_calendar(self, timestamp: int) -> None:
        if timestamp > self._window_start:
            self._per_day[calendar.calendar_index(timestamp)] += 1

        # Consecutive commits less than a day apart, in traversal order
        previous = self._previous_timestamp
        if previous is not None and abs(timestamp - previous) < SECONDS_PER_DAY:
            self._running_streak += 1
            self._best_running_streak = max(self._best_running_streak, self._running_streak)
        else:
            self._running_streak = 0
        self._previous_timestamp = timestamp

    def finalize(self) -> RepositoryStats:
        """Run the derived metrics and return the finished stats.

        Returns:
            RepositoryStats; the same object on repeated calls
        """
        if self._stats is not None:
            return self._stats

        days = tuple(self._per_day)
        derived = {}
        if self.options.calendar:
            derived = dict(
                max_commits_in_a_day=calendar.max_commits_in_a_day(days),
                commits_last_year=calendar.commits_last_year(days),
                longest_commit_streak=calendar.longest_streak(days),
                current_commit_streak=self._best_running_streak,
            )

        stats = RepositoryStats(
            commit_count=self._commit_count,
            last_commit_timestamp=self._last_commit,
            contributors=dict(self._contributors),
            total_files_changed=self._files_changed,
            total_lines_inserted=self._lines_inserted,
            total_lines_deleted=self._lines_deleted,
            commits_per_calendar_day=days,
            commits_per_weekday=tuple(self._per_weekday),
            now=self.now,
            **derived,
        )

        logger.debug(
            "Accumulated %d commits from %d contributors",
            stats.commit_count,
            stats.contributor_count,
        )
        self._stats = stats
        return stats

    def consume(self, commits: Iterable[Commit]) -> RepositoryStats:
        """Add every commit of a stream, then finalize.

        Args:
            commits: Commit stream, consumed exactly once

        Returns:
            Finished RepositoryStats
        """
        for commit in commits:
            self.add(commit)
        return self.finalize()

    @property
    def stats(self) -> RepositoryStats:
        """Get the finalized repository stats."""
        return self.finalize()


def gather_stats(
    commits: Iterable[Commit],
    options: Optional[AnalysisOptions] = None,
    now: Optional[int] = None,
) -> RepositoryStats:
    """Compute RepositoryStats for a commit stream in one pass."""
    return StatsAccumulator(options, now=now).consume(commits)
