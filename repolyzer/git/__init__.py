"""Git operations module."""

from repolyzer.git.errors import CommitReadError, GitRepositoryError, UnsupportedLocationError
from repolyzer.git.location import GitLocation
from repolyzer.git.repository import GitRepository

__all__ = [
    "CommitReadError",
    "GitLocation",
    "GitRepository",
    "GitRepositoryError",
    "UnsupportedLocationError",
]
