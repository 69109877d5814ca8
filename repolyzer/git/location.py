"""Parsing of the repository location argument."""

from dataclasses import dataclass
from pathlib import Path
from typing import Optional
from urllib.parse import urlparse

from repolyzer.git.errors import GitRepositoryError, UnsupportedLocationError


@dataclass(frozen=True)
class GitLocation:
    """A local path or a remote URL pointing at a git repository."""

    path: Optional[Path] = None
    url: Optional[str] = None

    @property
    def is_remote(self) -> bool:
        return self.url is not None

    @property
    def name(self) -> str:
        """Repository name derived from the path or URL."""
        if self.url is not None:
            stem = urlparse(self.url).path.rstrip("/").rsplit("/", 1)[-1]
            return stem.removesuffix(".git") or self.url
        return self.path.resolve().name

    @classmethod
    def parse(cls, location: str) -> "GitLocation":
        """Classify a location string.

        HTTP(S) URLs are remote, SSH remotes are refused and everything else
        is treated as a local directory.

        Args:
            location: Path or URL given by the user

        Returns:
            GitLocation for the argument

        Raises:
            UnsupportedLocationError: For SSH remotes
            GitRepositoryError: If a local path is missing or not a directory
        """
        if location.startswith("http"):
            parsed = urlparse(location)
            if parsed.scheme not in ("http", "https") or not parsed.netloc:
                raise GitRepositoryError(f"Could not detect valid URL: {location}")
            return cls(url=location)

        if location.startswith("git@"):
            raise UnsupportedLocationError(
                "The provided path seems to be using SSH, which is not supported yet"
            )

        path = Path(location)
        if not path.is_dir():
            raise GitRepositoryError(
                f"The provided path either does not exist, or is not a directory: {location}"
            )
        return cls(path=path)
