"""Shared pytest fixtures for repolyzer tests."""

import pytest

from repolyzer.models import Commit, DiffStats, RepositoryStats

# 2023-11-14 22:13:20 UTC, a Tuesday; calendar slot 330
NOW = 1_700_000_000
TODAY_DAY_NUMBER = NOW // 86_400
TODAY_SLOT = 330


@pytest.fixture
def now():
    """Pinned wall-clock time for trailing-year calculations."""
    return NOW


@pytest.fixture
def slot_timestamp():
    """Noon UTC of the day within the trailing year that maps to a slot.

    Only valid for slots up to today's slot (330).
    """

    def _timestamp(slot: int) -> int:
        assert 0 <= slot <= TODAY_SLOT
        day = TODAY_DAY_NUMBER - (TODAY_SLOT - slot)
        return day * 86_400 + 43_200

    return _timestamp


@pytest.fixture
def same_day_commits():
    """Three commits on the same UTC day: one with a parent, two roots."""
    return [
        Commit(
            sha="c3",
            author="X",
            timestamp=NOW - 3_600,
            parent_diff=DiffStats(files_changed=2, lines_inserted=10, lines_deleted=3),
        ),
        Commit(sha="c2", author="Y", timestamp=NOW - 7_200),
        Commit(sha="c1", author="X", timestamp=NOW - 10_800),
    ]


@pytest.fixture
def sample_repository_stats():
    """Repository stats with known values."""
    days = [0] * 365
    days[100] = 1
    days[101] = 4
    days[102] = 10
    days[TODAY_SLOT] = 2
    return RepositoryStats(
        commit_count=30,
        last_commit_timestamp=NOW - 3_600,
        contributors={
            "Alice": 10,
            "Bob": 8,
            "Carol": 5,
            "Dave": 3,
            "Erin": 2,
            "Frank": 1,
            "Grace": 1,
        },
        total_files_changed=42,
        total_lines_inserted=1200,
        total_lines_deleted=300,
        commits_per_calendar_day=tuple(days),
        commits_last_year=17,
        longest_commit_streak=3,
        current_commit_streak=4,
        max_commits_in_a_day=10,
        commits_per_weekday=(6, 5, 4, 3, 7, 3, 2),
        now=NOW,
    )
