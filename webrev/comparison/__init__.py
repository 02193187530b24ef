"""Comparison sources: where patches and file contents come from."""

from .base import ComparisonSource
from .diff_split import split_diff
from .git_source import GitSource
from .webrev_dir import WebrevDirSource


__all__ = [
    "ComparisonSource",
    "GitSource",
    "WebrevDirSource",
    "split_diff",
]
