"""Data models for git history statistics."""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Callable, Optional

from repolyzer.config import CALENDAR_DAYS


@dataclass(frozen=True)
class DiffStats:
    """Changes between a commit and its first parent."""

    files_changed: int = 0
    lines_inserted: int = 0
    lines_deleted: int = 0


@dataclass
class Commit:
    """Read-only view of a commit yielded by a commit source.

    The first-parent diff is expensive for real repositories, so sources
    may hand in a ``diff_loader`` instead of a precomputed ``parent_diff``.
    The loader runs at most once, on the first call to :meth:`diff`.
    """

    sha: str
    author: Optional[str]
    timestamp: int
    parent_diff: Optional[DiffStats] = None
    diff_loader: Optional[Callable[[], Optional[DiffStats]]] = field(
        default=None, repr=False, compare=False
    )

    def diff(self) -> Optional[DiffStats]:
        """Diff against the first parent, or None for a root commit."""
        if self.diff_loader is not None:
            self.parent_diff = self.diff_loader()
            self.diff_loader = None
        return self.parent_diff


@dataclass(frozen=True)
class AnalysisOptions:
    """Optional aggregates computed during a pass.

    Commit count, contributors and last commit time are always collected.
    """

    churn: bool = False
    calendar: bool = False
    weekdays: bool = False

    @classmethod
    def everything(cls) -> "AnalysisOptions":
        return cls(churn=True, calendar=True, weekdays=True)


def _empty_calendar() -> tuple[int, ...]:
    return (0,) * CALENDAR_DAYS


def _empty_weekdays() -> tuple[int, ...]:
    return (0,) * 7


@dataclass(frozen=True)
class RepositoryStats:
    """Aggregated statistics for a repository.

    Built once at the end of a pass and shared with every reader, so the
    fields cannot be reassigned. Treat ``contributors`` as read-only too.
    """

    commit_count: int = 0
    last_commit_timestamp: int = 0
    contributors: dict[str, int] = field(default_factory=dict)

    # Churn, summed over commits that have a parent
    total_files_changed: int = 0
    total_lines_inserted: int = 0
    total_lines_deleted: int = 0

    # Trailing-year calendar, indexed by (timestamp // 86400) % 365
    commits_per_calendar_day: tuple[int, ...] = field(default_factory=_empty_calendar)
    commits_last_year: int = 0
    longest_commit_streak: int = 0
    current_commit_streak: int = 0
    max_commits_in_a_day: int = 0

    # 0 = Monday ... 6 = Sunday
    commits_per_weekday: tuple[int, ...] = field(default_factory=_empty_weekdays)

    # Wall-clock time the pass was pinned to
    now: int = 0

    @property
    def contributor_count(self) -> int:
        """Number of distinct contributors."""
        return len(self.contributors)

    @property
    def net_lines(self) -> int:
        """Lines inserted minus lines deleted."""
        return self.total_lines_inserted - self.total_lines_deleted

    @property
    def last_commit_date(self) -> Optional[datetime]:
        """Most recent commit time as a UTC datetime."""
        if self.commit_count == 0:
            return None
        return datetime.fromtimestamp(self.last_commit_timestamp, tz=timezone.utc)

    def to_dict(self) -> dict:
        """JSON-serializable view of the stats."""
        return {
            "commit_count": self.commit_count,
            "last_commit_timestamp": self.last_commit_timestamp,
            "contributors": dict(self.contributors),
            "total_files_changed": self.total_files_changed,
            "total_lines_inserted": self.total_lines_inserted,
            "total_lines_deleted": self.total_lines_deleted,
            "commits_per_calendar_day": list(self.commits_per_calendar_day),
            "commits_last_year": self.commits_last_year,
            "longest_commit_streak": self.longest_commit_streak,
            "current_commit_streak": self.current_commit_streak,
            "max_commits_in_a_day": self.max_commits_in_a_day,
            "commits_per_weekday": list(self.commits_per_weekday),
            "now": self.now,
        }
