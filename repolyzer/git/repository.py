"""GitPython wrapper for repository operations."""

import shutil
import tempfile
from pathlib import Path
from typing import Iterator, Optional, Union

from git import Repo
from git.exc import GitCommandError, InvalidGitRepositoryError, NoSuchPathError

from repolyzer.config import CLONE_DIR
from repolyzer.git.errors import CommitReadError, GitRepositoryError
from repolyzer.git.location import GitLocation
from repolyzer.logging_config import get_logger
from repolyzer.models import Commit, DiffStats

logger = get_logger(__name__)


class GitRepository:
    """Wrapper around GitPython for reading commit history.

    Local repositories are opened in place. Remote repositories are cloned
    into a temporary directory which :meth:`close` removes again, so remote
    instances should be used as context managers.
    """

    def __init__(self, location: Union[GitLocation, str], clone_dir: Optional[str] = None):
        """Open or clone the repository.

        Args:
            location: GitLocation, or a path/URL string to parse
            clone_dir: Parent directory for temporary clones
                       (defaults to REPOLYZER_CLONE_DIR)

        Raises:
            GitRepositoryError: If the repository cannot be opened or cloned
        """
        if isinstance(location, str):
            location = GitLocation.parse(location)
        self.location = location
        self._temp_dir: Optional[Path] = None

        if location.is_remote:
            self._repo = self._clone(location.url, clone_dir or CLONE_DIR)
        else:
            self._repo = self._open(location.path)

    def _open(self, path: Path) -> Repo:
        logger.debug("Opening local repository %s", path)
        try:
            return Repo(path)
        except (InvalidGitRepositoryError, NoSuchPathError):
            raise GitRepositoryError(f"Not a git repository: {path}")

    def _clone(self, url: str, clone_dir: str) -> Repo:
        Path(clone_dir).mkdir(parents=True, exist_ok=True)
        self._temp_dir = Path(tempfile.mkdtemp(prefix="repolyzer-", dir=clone_dir))
        logger.debug("Cloning %s into %s", url, self._temp_dir)
        try:
            return Repo.clone_from(url, self._temp_dir)
        except GitCommandError as e:
            self.close()
            raise GitRepositoryError(f"Failed to clone repository {url}: {e}")

    @property
    def name(self) -> str:
        """Get the repository name from the directory or URL."""
        return self.location.name

    @property
    def path(self) -> Path:
        """Working tree of the opened (or cloned) repository."""
        return Path(self._repo.working_tree_dir or self._repo.git_dir)

    def iter_commits(self, rev: str = "HEAD") -> Iterator[Commit]:
        """Iterate over commits reachable from a revision, newest first.

        An empty repository (no HEAD yet) yields nothing.

        Args:
            rev: Revision to start the walk from

        Yields:
            Commit views with a lazily computed first-parent diff

        Raises:
            CommitReadError: If a commit cannot be resolved or read
        """
        if rev == "HEAD" and not self._repo.head.is_valid():
            logger.debug("Repository %s has no HEAD, nothing to walk", self.name)
            return

        try:
            for git_commit in self._repo.iter_commits(rev=rev):
                yield self._convert_commit(git_commit)
        except (GitCommandError, ValueError) as e:
            raise CommitReadError(f"Could not read commit history: {e}")

    def _convert_commit(self, git_commit) -> Commit:
        """Convert a GitPython commit to our Commit model.

        Args:
            git_commit: GitPython Commit object

        Returns:
            Commit view; the diff is computed on first access
        """
        try:
            author = git_commit.author.name
            timestamp = int(git_commit.authored_date)
        except (GitCommandError, ValueError) as e:
            raise CommitReadError(f"Could not find commit {git_commit.hexsha}: {e}")

        return Commit(
            sha=git_commit.hexsha,
            author=author,
            timestamp=timestamp,
            diff_loader=lambda: self.get_diff_stats(git_commit),
        )

    def get_diff_stats(self, git_commit) -> Optional[DiffStats]:
        """Get diff statistics against the first parent.

        Args:
            git_commit: GitPython Commit object

        Returns:
            DiffStats, or None for a root commit

        Raises:
            CommitReadError: If the diff cannot be computed
        """
        if not git_commit.parents:
            return None

        try:
            total = git_commit.stats.total
        except (GitCommandError, ValueError) as e:
            raise CommitReadError(f"Failed to get diff for {git_commit.hexsha}: {e}")

        return DiffStats(
            files_changed=total.get("files", 0),
            lines_inserted=total.get("insertions", 0),
            lines_deleted=total.get("deletions", 0),
        )

    def close(self) -> None:
        """Release the repository and remove a temporary clone."""
        repo = getattr(self, "_repo", None)
        if repo is not None:
            repo.close()

        if self._temp_dir is not None:
            logger.debug("Removing temporary clone %s", self._temp_dir)
            shutil.rmtree(self._temp_dir, ignore_errors=True)
            self._temp_dir = None

    def __enter__(self) -> "GitRepository":
        return self

    def __exit__(self, exc_type, exc, tb) -> None:
        self.close()
