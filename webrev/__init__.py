"""webrev - code review views built on a hunk model with context expansion."""

__version__ = "0.1.0"

from .errors import ComparisonError, MalformedPatchError, ViewNotAvailableError, WebrevError
from .hunks import (
    Hunk,
    HunkCache,
    HunkKind,
    LineRole,
    classify,
    expand_context,
    is_pure_addition,
    is_pure_deletion,
    parse_patch,
)
from .models import ChangeSummary, CommitInfo, Comparison, FileChange, FileStatus, RepoRef


__all__ = [
    "__version__",
    # Hunk engine
    "Hunk",
    "HunkCache",
    "HunkKind",
    "LineRole",
    "classify",
    "expand_context",
    "is_pure_addition",
    "is_pure_deletion",
    "parse_patch",
    # Comparison model
    "ChangeSummary",
    "CommitInfo",
    "Comparison",
    "FileChange",
    "FileStatus",
    "RepoRef",
    # Errors
    "ComparisonError",
    "MalformedPatchError",
    "ViewNotAvailableError",
    "WebrevError",
]
