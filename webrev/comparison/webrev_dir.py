"""Comparison source reading a webrev directory of JSON dumps."""

from datetime import datetime
import json
import logging
from pathlib import Path
from typing import Any

from ..errors import ComparisonError
from ..models import CommitInfo, Comparison, FileChange, RepoRef
from .base import ComparisonSource


logger = logging.getLogger(__name__)


def _parse_timestamp(value: str | None) -> datetime | None:
    if not value:
        return None
    return datetime.fromisoformat(value.replace("Z", "+00:00"))


def _parse_ref(data: dict[str, Any]) -> RepoRef:
    repo = data.get("repo") or {}
    return RepoRef(
        full_name=repo.get("full_name", ""),
        sha=data["sha"],
        html_url=repo.get("html_url"),
    )


def _parse_file(data: dict[str, Any]) -> FileChange:
    return FileChange(
        filename=data["filename"],
        status=data["status"],
        patch=data.get("patch"),
        previous_filename=data.get("previous_filename"),
        additions=data.get("additions", 0),
        deletions=data.get("deletions", 0),
        changes=data.get("changes", 0),
    )


def _parse_commit(data: dict[str, Any]) -> CommitInfo:
    return CommitInfo(
        sha=data["sha"],
        message=data.get("commit", {}).get("message", ""),
        filenames=[f["filename"] for f in data.get("files", [])],
    )


class WebrevDirSource(ComparisonSource):
    """Reads a comparison laid out as a webrev directory.

    Expected layout::

        metadata.json     base/head refs, creation time, PR number
        comparison.json   GitHub compare API response (``files``)
        commits.json      optional list of commits with their files
        base/<path>       file contents at the base revision
        head/<path>       file contents at the head revision
    """

    def __init__(self, path: Path):
        self.path = Path(path).expanduser()

    def _read_json(self, name: str, required: bool = True) -> Any:
        json_path = self.path / name
        if not json_path.exists():
            if required:
                raise ComparisonError(f"Missing {name} in {self.path}")
            return None
        try:
            return json.loads(json_path.read_text())
        except json.JSONDecodeError as e:
            raise ComparisonError(f"Invalid JSON in {json_path}: {e}") from e

    def load(self) -> Comparison:
        if not self.path.is_dir():
            raise ComparisonError(f"Webrev directory not found: {self.path}")

        metadata = self._read_json("metadata.json")
        comparison = self._read_json("comparison.json")
        commits = self._read_json("commits.json", required=False) or []

        try:
            result = Comparison(
                base=_parse_ref(metadata["base"]),
                head=_parse_ref(metadata["head"]),
                files=[_parse_file(f) for f in comparison.get("files", [])],
                commits=[_parse_commit(c) for c in commits],
                number=metadata.get("number"),
                created_at=_parse_timestamp(metadata.get("created_at")),
            )
        except (KeyError, TypeError, ValueError) as e:
            raise ComparisonError(f"Unexpected webrev data in {self.path}: {e}") from e

        logger.info(f"Loaded {len(result.files)} files from {self.path}")
        return result

    def _read_content(self, side: str, filename: str) -> str:
        content_path = self.path / side / filename
        try:
            return content_path.read_text()
        except OSError as e:
            raise ComparisonError(f"Cannot read {side} content of {filename}: {e}") from e

    def read_base(self, comparison: Comparison, file: FileChange) -> str:
        return self._read_content("base", file.base_filename)

    def read_head(self, comparison: Comparison, file: FileChange) -> str:
        return self._read_content("head", file.filename)
