"""Shared test fixtures for webrev."""

import json
from pathlib import Path

from click.testing import CliRunner
from git import Actor, Repo
import pytest


# Path to test data directory
TEST_DATA_DIR = Path(__file__).parent / "data"

BASE_SHA = "aaaaaaaa11111111111111111111111111111111"
HEAD_SHA = "bbbbbbbb22222222222222222222222222222222"

MAIN_PATCH = """\
@@ -1,12 +1,13 @@
 line1
 line2
-line3
+line3 changed
 line4
 line5
 line6
 line7
 line8
 line9
+inserted
 line10
 line11
 line12"""


@pytest.fixture
def cli_runner() -> CliRunner:
    """Create a Click CLI runner for testing commands."""
    return CliRunner()


@pytest.fixture
def isolated_filesystem(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Change to an isolated temporary directory with no user config.

    Returns:
        Path to the temporary directory.
    """
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("HOME", str(tmp_path))
    return tmp_path


@pytest.fixture
def sample_patch_path() -> Path:
    """Path to a git patch for src/main.c."""
    return TEST_DATA_DIR / "sample.patch"


@pytest.fixture
def main_base() -> str:
    return (TEST_DATA_DIR / "main_base.c").read_text()


@pytest.fixture
def main_head() -> str:
    return (TEST_DATA_DIR / "main_head.c").read_text()


@pytest.fixture
def webrev_dir(tmp_path: Path, main_base: str, main_head: str) -> Path:
    """Create a webrev directory with a modified, added, deleted and renamed file.

    Returns:
        Path to the webrev directory.
    """
    root = tmp_path / "webrev"
    metadata = {
        "base": {
            "sha": BASE_SHA,
            "repo": {"full_name": "openjdk/jdk", "html_url": "https://github.com/openjdk/jdk"},
        },
        "head": {"sha": HEAD_SHA, "repo": {"full_name": "contributor/jdk"}},
        "created_at": "2020-06-01T12:00:00Z",
        "number": 42,
    }
    comparison = {
        "files": [
            {
                "filename": "src/main.c",
                "status": "modified",
                "additions": 2,
                "deletions": 1,
                "changes": 3,
                "patch": MAIN_PATCH,
            },
            {
                "filename": "docs/new.md",
                "status": "added",
                "additions": 2,
                "deletions": 0,
                "changes": 2,
                "patch": "@@ -0,0 +1,2 @@\n+hello\n+world",
            },
            {
                "filename": "old.txt",
                "status": "removed",
                "additions": 0,
                "deletions": 1,
                "changes": 1,
                "patch": "@@ -1 +0,0 @@\n-bye",
            },
            {
                "filename": "lib/util.py",
                "previous_filename": "util.py",
                "status": "renamed",
                "additions": 0,
                "deletions": 0,
                "changes": 0,
            },
        ],
    }
    commits = [
        {
            "sha": "c1c1c1c1" + "0" * 32,
            "commit": {"message": "Fix line3\n\nLonger description."},
            "files": [{"filename": "src/main.c"}],
        },
        {
            "sha": "c2c2c2c2" + "0" * 32,
            "commit": {"message": "Add docs"},
            "files": [{"filename": "docs/new.md"}, {"filename": "src/main.c"}],
        },
    ]

    files = {
        "base/src/main.c": main_base,
        "head/src/main.c": main_head,
        "head/docs/new.md": "hello\nworld\n",
        "base/old.txt": "bye\n",
        "base/util.py": "x = 1\n",
        "head/lib/util.py": "x = 1\n",
    }
    for name, content in files.items():
        path = root / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)

    (root / "metadata.json").write_text(json.dumps(metadata, indent=2))
    (root / "comparison.json").write_text(json.dumps(comparison, indent=2))
    (root / "commits.json").write_text(json.dumps(commits, indent=2))
    return root


@pytest.fixture
def temp_git_repo(tmp_path: Path, main_base: str, main_head: str) -> tuple[Path, Repo, str]:
    """Create a git repository with a base commit and one change on top.

    Returns:
        Tuple of (repo_path, Repo instance, base commit sha).
    """
    repo_path = tmp_path / "project"
    repo_path.mkdir()
    repo = Repo.init(repo_path)
    repo.config_writer().set_value("user", "name", "Test User").release()
    repo.config_writer().set_value("user", "email", "test@example.com").release()
    actor = Actor("Test User", "test@example.com")

    (repo_path / "src").mkdir()
    (repo_path / "src" / "main.c").write_text(main_base)
    (repo_path / "old.txt").write_text("bye\n")
    repo.index.add(["src/main.c", "old.txt"])
    base = repo.index.commit("Initial commit", author=actor, committer=actor)

    (repo_path / "src" / "main.c").write_text(main_head)
    (repo_path / "docs").mkdir()
    (repo_path / "docs" / "new.md").write_text("hello\nworld\n")
    repo.index.add(["src/main.c", "docs/new.md"])
    repo.index.remove(["old.txt"], working_tree=True)
    repo.index.commit("Change main and add docs", author=actor, committer=actor)

    return repo_path, repo, base.hexsha


@pytest.fixture
def config_file(tmp_path: Path) -> Path:
    """Write a config file overriding some view context sizes."""
    config_path = tmp_path / "webrev.yaml"
    config_path.write_text(
        """\
views:
  udiff_context: 2
  sdiff_context: 10

logging:
  level: "debug"
"""
    )
    return config_path
