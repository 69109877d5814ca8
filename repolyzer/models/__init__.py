"""Data models for repolyzer."""

from repolyzer.models.dataclasses import (
    AnalysisOptions,
    Commit,
    DiffStats,
    RepositoryStats,
)

__all__ = ["AnalysisOptions", "Commit", "DiffStats", "RepositoryStats"]
