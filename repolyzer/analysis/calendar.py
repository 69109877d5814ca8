"""Calendar heat grid calculations.

The trailing-year calendar is a fixed array of 365 slots indexed by
``(timestamp // 86400) % 365``. Slot order is therefore modular day order,
not calendar order: runs and grid rows are read in slot index order, and
they wrap at the modulus rather than at real year boundaries.
"""

from datetime import date, datetime, timedelta, timezone
from typing import Sequence

from repolyzer.config import CALENDAR_DAYS, INTENSITY_LEVELS, SECONDS_PER_DAY


def calendar_index(timestamp: int) -> int:
    """Calendar slot for a commit timestamp."""
    return (timestamp // SECONDS_PER_DAY) % CALENDAR_DAYS


def max_commits_in_a_day(days: Sequence[int]) -> int:
    """Highest commit count of any calendar slot, 0 for an empty calendar."""
    return max(days, default=0)


def commits_last_year(days: Sequence[int]) -> int:
    """Total commits bucketed into the trailing-year calendar."""
    return sum(days)


def longest_streak(days: Sequence[int]) -> int:
    """Length of the longest run of consecutive slots with commits.

    Args:
        days: Per-slot commit counts, scanned in index order

    Returns:
        Longest run length, 0 if no slot has commits
    """
    longest = 0
    current = 0
    for count in days:
        if count > 0:
            current += 1
            longest = max(longest, current)
        else:
            current = 0
    return longest


def symbol_distribution(max_a_day: int, levels: int = INTENSITY_LEVELS) -> list[int]:
    """Upper bounds for each intensity level.

    ``range_size = max_a_day // levels``; the bounds are multiples of it.
    When ``max_a_day < levels`` every bound is 0.

    Args:
        max_a_day: Highest commit count of any slot
        levels: Number of intensity levels

    Returns:
        List of ``levels`` bounds, starting at 0
    """
    range_size = max_a_day // levels
    return [range_size * i for i in range(levels)]


def intensity_level(count: int, distribution: Sequence[int]) -> int:
    """Lowest level whose bound is >= count, else the highest level."""
    for level, bound in enumerate(distribution):
        if count <= bound:
            return level
    return len(distribution) - 1


def utc_date(timestamp: int) -> date:
    """Calendar date of a timestamp in UTC."""
    return datetime.fromtimestamp(timestamp, tz=timezone.utc).date()


def weekday_column_count(today: date, weekday: int) -> int:
    """Number of dates with ``weekday`` among the trailing 365 days.

    Args:
        today: Newest day of the window
        weekday: 0 = Monday ... 6 = Sunday

    Returns:
        Usually 52, sometimes 53
    """
    return sum(
        1
        for offset in range(CALENDAR_DAYS)
        if (today - timedelta(days=offset)).weekday() == weekday
    )


def weekday_row(days: Sequence[int], weekday: int, today: date) -> list[int]:
    """Commit counts for one weekday row of the heat grid.

    Reads the calendar with stride 7 starting at ``weekday``, one column per
    week. The row ends early when the index leaves the calendar.

    Args:
        days: Per-slot commit counts (365 entries)
        weekday: 0 = Monday ... 6 = Sunday
        today: Newest day of the trailing window

    Returns:
        Commit counts, one per column
    """
    row = []
    for week in range(weekday_column_count(today, weekday)):
        index = 7 * week + weekday
        if index >= len(days):
            break
        row.append(days[index])
    return row


def weekday_grid(days: Sequence[int], today: date) -> list[list[int]]:
    """All seven weekday rows, Monday first."""
    return [weekday_row(days, weekday, today) for weekday in range(7)]
