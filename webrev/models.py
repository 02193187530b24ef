"""Data models for webrev comparisons."""

from dataclasses import dataclass, field
from datetime import datetime
from enum import Enum


class FileStatus(str, Enum):
    """How a file changed between base and head."""

    ADDED = "added"
    DELETED = "deleted"
    MODIFIED = "modified"
    RENAMED = "renamed"
    COPIED = "copied"
    CHANGED = "changed"
    UNCHANGED = "unchanged"

    @classmethod
    def parse(cls, value: str) -> "FileStatus":
        """Parse a status string; GitHub reports deletions as ``removed``."""
        if value == "removed":
            return cls.DELETED
        return cls(value)

    @property
    def is_modified(self) -> bool:
        """Whether the file exists on both sides."""
        return self in (FileStatus.MODIFIED, FileStatus.RENAMED, FileStatus.COPIED, FileStatus.CHANGED)

    @property
    def has_base(self) -> bool:
        return self is not FileStatus.ADDED

    @property
    def has_head(self) -> bool:
        return self is not FileStatus.DELETED


@dataclass
class FileChange:
    """A single file in a comparison."""

    filename: str
    status: FileStatus
    patch: str | None = None  # None for binary files
    previous_filename: str | None = None  # Set for renamed/copied files
    additions: int = 0
    deletions: int = 0
    changes: int = 0

    def __post_init__(self):
        if isinstance(self.status, str) and not isinstance(self.status, FileStatus):
            self.status = FileStatus.parse(self.status)

    @property
    def base_filename(self) -> str:
        """Name of the file at the base revision."""
        if self.status in (FileStatus.RENAMED, FileStatus.COPIED) and self.previous_filename:
            return self.previous_filename
        return self.filename


@dataclass
class CommitInfo:
    """A commit in the compared range."""

    sha: str
    message: str
    filenames: list[str] = field(default_factory=list)

    @property
    def subject(self) -> str:
        return self.message.split("\n", 1)[0]

    @property
    def short_sha(self) -> str:
        return self.sha[:8]


@dataclass
class RepoRef:
    """One side of a comparison: repository and revision."""

    full_name: str
    sha: str
    html_url: str | None = None


@dataclass
class ChangeSummary:
    """Line change counters for one file or a whole comparison."""

    changes: int = 0
    additions: int = 0
    deletions: int = 0

    def format(self) -> str:
        return f"{self.changes} lines changed; {self.additions} ins; {self.deletions} del"


def summarize(files: list[FileChange]) -> ChangeSummary:
    """Total the per-file change counters."""
    summary = ChangeSummary()
    for file in files:
        summary.changes += file.changes
        summary.additions += file.additions
        summary.deletions += file.deletions
    return summary


def commits_per_file(commits: list[CommitInfo]) -> dict[str, list[CommitInfo]]:
    """Map each filename to the commits touching it, most recent first.

    Args:
        commits: Commits in chronological order.
    """
    result: dict[str, list[CommitInfo]] = {}
    for commit in commits:
        for filename in commit.filenames:
            result.setdefault(filename, []).insert(0, commit)
    return result


@dataclass
class Comparison:
    """Everything needed to review the difference between two revisions."""

    base: RepoRef
    head: RepoRef
    files: list[FileChange] = field(default_factory=list)
    commits: list[CommitInfo] = field(default_factory=list)
    number: int | None = None  # Pull request number, if any
    created_at: datetime | None = None

    @property
    def summary(self) -> ChangeSummary:
        return summarize(self.files)

    def find_file(self, name_or_index: str | int) -> int:
        """Resolve a file index from an index or a filename.

        Raises:
            KeyError: If no file matches.
        """
        if isinstance(name_or_index, int) or str(name_or_index).isdigit():
            index = int(name_or_index)
            if 0 <= index < len(self.files):
                return index
            raise KeyError(f"File index out of range: {index}")

        for index, file in enumerate(self.files):
            if file.filename == name_or_index:
                return index
        for index, file in enumerate(self.files):
            if file.filename.endswith("/" + name_or_index):
                return index
        raise KeyError(f"File not in comparison: {name_or_index}")

    def neighbor(self, index: int, step: int) -> int | None:
        """Index of the closest modified file before (step=-1) or after (step=1)."""
        i = index + step
        while 0 <= i < len(self.files):
            if self.files[i].status.is_modified:
                return i
            i += step
        return None
