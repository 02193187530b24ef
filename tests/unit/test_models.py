"""Tests for comparison data models."""

import pytest

from webrev.models import (
    ChangeSummary,
    CommitInfo,
    Comparison,
    FileChange,
    FileStatus,
    RepoRef,
    commits_per_file,
    summarize,
)


def make_comparison(*files: FileChange) -> Comparison:
    return Comparison(
        base=RepoRef(full_name="org/repo", sha="a" * 40),
        head=RepoRef(full_name="org/repo", sha="b" * 40),
        files=list(files),
    )


class TestFileStatus:
    """Tests for FileStatus."""

    def test_removed_means_deleted(self):
        assert FileStatus.parse("removed") is FileStatus.DELETED

    def test_parse_known(self):
        assert FileStatus.parse("renamed") is FileStatus.RENAMED

    def test_parse_unknown(self):
        with pytest.raises(ValueError):
            FileStatus.parse("exploded")

    def test_sides(self):
        assert not FileStatus.ADDED.has_base
        assert FileStatus.ADDED.has_head
        assert FileStatus.DELETED.has_base
        assert not FileStatus.DELETED.has_head

    @pytest.mark.parametrize("status", ["modified", "renamed", "copied", "changed"])
    def test_modified_like(self, status):
        assert FileStatus(status).is_modified

    @pytest.mark.parametrize("status", ["added", "deleted", "unchanged"])
    def test_not_modified_like(self, status):
        assert not FileStatus(status).is_modified


class TestFileChange:
    """Tests for FileChange."""

    def test_status_string_parsed(self):
        assert FileChange("a.txt", "removed").status is FileStatus.DELETED

    def test_base_filename_of_rename(self):
        file = FileChange("lib/util.py", FileStatus.RENAMED, previous_filename="util.py")

        assert file.base_filename == "util.py"

    def test_base_filename_of_modified(self):
        assert FileChange("a.txt", FileStatus.MODIFIED).base_filename == "a.txt"


class TestSummary:
    """Tests for change counters."""

    def test_summarize(self):
        summary = summarize(
            [
                FileChange("a", "modified", additions=2, deletions=1, changes=3),
                FileChange("b", "added", additions=4, changes=4),
            ]
        )

        assert summary == ChangeSummary(changes=7, additions=6, deletions=1)
        assert summary.format() == "7 lines changed; 6 ins; 1 del"

    def test_empty(self):
        assert summarize([]).format() == "0 lines changed; 0 ins; 0 del"


class TestCommits:
    """Tests for commit helpers."""

    def test_subject_and_short_sha(self):
        commit = CommitInfo("0123456789abcdef", "Subject line\n\nBody")

        assert commit.subject == "Subject line"
        assert commit.short_sha == "01234567"

    def test_commits_per_file_most_recent_first(self):
        first = CommitInfo("1" * 40, "first", ["a.c", "b.c"])
        second = CommitInfo("2" * 40, "second", ["a.c"])

        result = commits_per_file([first, second])

        assert result["a.c"] == [second, first]
        assert result["b.c"] == [first]


class TestComparison:
    """Tests for Comparison lookups."""

    def test_find_file_by_index(self):
        comparison = make_comparison(FileChange("a.c", "modified"), FileChange("b.c", "modified"))

        assert comparison.find_file(1) == 1
        assert comparison.find_file("1") == 1

    def test_find_file_by_name(self):
        comparison = make_comparison(FileChange("src/a.c", "modified"), FileChange("a.c", "added"))

        assert comparison.find_file("a.c") == 1
        assert comparison.find_file("src/a.c") == 0

    def test_find_file_by_suffix(self):
        comparison = make_comparison(FileChange("src/deep/a.c", "modified"))

        assert comparison.find_file("deep/a.c") == 0

    def test_find_file_missing(self):
        comparison = make_comparison(FileChange("a.c", "modified"))

        with pytest.raises(KeyError):
            comparison.find_file("b.c")
        with pytest.raises(KeyError):
            comparison.find_file(3)

    def test_neighbor_skips_added_and_deleted(self):
        comparison = make_comparison(
            FileChange("a.c", "modified"),
            FileChange("b.c", "added"),
            FileChange("c.c", "removed"),
            FileChange("d.c", "renamed", previous_filename="x.c"),
        )

        assert comparison.neighbor(0, 1) == 3
        assert comparison.neighbor(3, -1) == 0
        assert comparison.neighbor(3, 1) is None
        assert comparison.neighbor(0, -1) is None

    def test_summary(self):
        comparison = make_comparison(FileChange("a.c", "modified", additions=1, deletions=1, changes=2))

        assert comparison.summary.format() == "2 lines changed; 1 ins; 1 del"
