"""Exceptions raised while reading repositories."""


class GitRepositoryError(Exception):
    """Exception raised for git repository errors."""

    pass


class UnsupportedLocationError(GitRepositoryError):
    """The repository location uses a transport that is not supported."""

    pass


class CommitReadError(GitRepositoryError):
    """A commit in the history could not be read."""

    pass
