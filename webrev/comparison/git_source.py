"""Comparison source backed by a local git repository."""

from datetime import datetime, timezone
import logging
from pathlib import Path

from git import GitCommandError, InvalidGitRepositoryError, NoSuchPathError, Repo
from git.exc import BadName, BadObject

from ..errors import ComparisonError
from ..models import CommitInfo, Comparison, FileChange, RepoRef
from .base import ComparisonSource
from .diff_split import split_diff


logger = logging.getLogger(__name__)


class GitSource(ComparisonSource):
    """Compares two revisions of a local repository."""

    def __init__(self, repo_path: Path, base: str, head: str = "HEAD"):
        """Initialize the source.

        Args:
            repo_path: Path to the repository working tree.
            base: Base revision (any rev git understands).
            head: Head revision, defaults to HEAD.
        """
        self.repo_path = Path(repo_path).expanduser()
        self.base = base
        self.head = head
        self._repo: Repo | None = None

    @property
    def repo(self) -> Repo:
        if self._repo is None:
            try:
                self._repo = Repo(self.repo_path)
            except (InvalidGitRepositoryError, NoSuchPathError) as e:
                raise ComparisonError(f"Not a git repository: {self.repo_path}") from e
        return self._repo

    def _resolve(self, rev: str) -> str:
        try:
            return self.repo.commit(rev).hexsha
        except (BadName, BadObject, ValueError, GitCommandError) as e:
            raise ComparisonError(f"Unknown revision {rev!r} in {self.repo_path}") from e

    def load(self) -> Comparison:
        base_sha = self._resolve(self.base)
        head_sha = self._resolve(self.head)
        logger.info(f"Comparing {base_sha[:8]}..{head_sha[:8]} in {self.repo_path}")

        try:
            raw_diff = self.repo.git.diff(base_sha, head_sha, "-M", "-C", "--no-color", "--no-ext-diff")
            commits = [
                CommitInfo(
                    sha=commit.hexsha,
                    message=commit.message,
                    filenames=list(commit.stats.files.keys()),
                )
                for commit in self.repo.iter_commits(f"{base_sha}..{head_sha}", reverse=True)
            ]
        except GitCommandError as e:
            raise ComparisonError(f"git failed comparing {self.base}..{self.head}: {e}") from e

        name = self.repo_path.resolve().name
        comparison = Comparison(
            base=RepoRef(full_name=name, sha=base_sha),
            head=RepoRef(full_name=name, sha=head_sha),
            files=split_diff(raw_diff),
            commits=commits,
            created_at=datetime.now(timezone.utc),
        )
        logger.debug(f"Found {len(comparison.files)} changed files, {len(commits)} commits")
        return comparison

    def _show(self, sha: str, path: str) -> str:
        try:
            return self.repo.git.show(f"{sha}:{path}")
        except GitCommandError as e:
            raise ComparisonError(f"{path} not found at {sha[:8]}") from e

    def read_base(self, comparison: Comparison, file: FileChange) -> str:
        return self._show(comparison.base.sha, file.base_filename)

    def read_head(self, comparison: Comparison, file: FileChange) -> str:
        return self._show(comparison.head.sha, file.filename)
